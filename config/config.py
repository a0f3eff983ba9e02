"""
Configuration classes for the retail inventory project.
Defines tunables for the inventory core, recommendation scorer and auth service
in a type-safe, extensible way. Values can be overridden from the environment
(or a project-level .env file).
"""

import os
from dataclasses import dataclass, field

from utils.env import load_project_dotenv


@dataclass
class InventoryConfig:
    max_history_days: int = 30  # Window used to average daily consumption
    restock_horizon_days: int = 7  # Plans are only emitted for restocks due within this many days
    replenishment_factor: float = 1.5  # Recommended stock level = threshold * factor
    default_low_stock_threshold: int = 10
    audit_log_path: str | None = None

    @classmethod
    def from_env(cls) -> "InventoryConfig":
        """Build a config from INVENTORY_* environment variables, falling back to defaults."""
        load_project_dotenv()
        defaults = cls()
        return cls(
            max_history_days=int(os.getenv("INVENTORY_MAX_HISTORY_DAYS", defaults.max_history_days)),
            restock_horizon_days=int(os.getenv("INVENTORY_RESTOCK_HORIZON_DAYS", defaults.restock_horizon_days)),
            replenishment_factor=float(os.getenv("INVENTORY_REPLENISHMENT_FACTOR", defaults.replenishment_factor)),
            default_low_stock_threshold=int(
                os.getenv("INVENTORY_LOW_STOCK_THRESHOLD", defaults.default_low_stock_threshold)
            ),
            audit_log_path=os.getenv("INVENTORY_AUDIT_LOG_PATH") or defaults.audit_log_path,
        )


@dataclass
class RecommendationConfig:
    popularity_weight: float = 1.0
    category_weight: float = 2.0
    brand_weight: float = 1.0
    default_limit: int = 5


@dataclass
class AuthConfig:
    password_schemes: list[str] = field(default_factory=lambda: ["pbkdf2_sha256"])


# Example usage:
# inventory_config = InventoryConfig.from_env()
# manager = InventoryManager(config=inventory_config)
