from unittest.mock import patch

from config.config import AuthConfig, InventoryConfig, RecommendationConfig


def test_inventory_config_defaults():
    """Test InventoryConfig initializes with correct default values."""
    config = InventoryConfig()
    assert config.max_history_days == 30
    assert config.restock_horizon_days == 7
    assert config.replenishment_factor == 1.5
    assert config.default_low_stock_threshold == 10
    assert config.audit_log_path is None


def test_inventory_config_custom():
    config = InventoryConfig(max_history_days=14, replenishment_factor=2.0)
    assert config.max_history_days == 14
    assert config.replenishment_factor == 2.0
    # Check a default value is still correct
    assert config.restock_horizon_days == 7


@patch("config.config.load_project_dotenv")
def test_inventory_config_from_env(mock_load_dotenv, monkeypatch):
    monkeypatch.setenv("INVENTORY_MAX_HISTORY_DAYS", "60")
    monkeypatch.setenv("INVENTORY_RESTOCK_HORIZON_DAYS", "3")
    monkeypatch.setenv("INVENTORY_REPLENISHMENT_FACTOR", "1.25")
    monkeypatch.setenv("INVENTORY_LOW_STOCK_THRESHOLD", "25")
    monkeypatch.setenv("INVENTORY_AUDIT_LOG_PATH", "/var/log/inventory/audit.log")

    config = InventoryConfig.from_env()

    mock_load_dotenv.assert_called_once()
    assert config.max_history_days == 60
    assert config.restock_horizon_days == 3
    assert config.replenishment_factor == 1.25
    assert config.default_low_stock_threshold == 25
    assert config.audit_log_path == "/var/log/inventory/audit.log"


@patch("config.config.load_project_dotenv")
def test_inventory_config_from_env_falls_back_to_defaults(mock_load_dotenv, monkeypatch):
    for name in (
        "INVENTORY_MAX_HISTORY_DAYS",
        "INVENTORY_RESTOCK_HORIZON_DAYS",
        "INVENTORY_REPLENISHMENT_FACTOR",
        "INVENTORY_LOW_STOCK_THRESHOLD",
        "INVENTORY_AUDIT_LOG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    assert InventoryConfig.from_env() == InventoryConfig()


def test_recommendation_config_defaults():
    config = RecommendationConfig()
    assert config.popularity_weight == 1.0
    assert config.category_weight == 2.0
    assert config.brand_weight == 1.0
    assert config.default_limit == 5


def test_auth_config_default_factory():
    """Test that the default_factory creates separate list instances."""
    config1 = AuthConfig()
    config2 = AuthConfig()
    assert config1.password_schemes == ["pbkdf2_sha256"]
    assert config1.password_schemes is not config2.password_schemes
