import logging

import pytest

from services.catalog import Catalog
from services.errors import InsufficientStockError, NotFoundError
from services.ledger import StockLedger


@pytest.fixture
def ledger() -> StockLedger:
    """Provides a ledger over a catalog holding ITM001 and ITM002."""
    catalog = Catalog()
    catalog.add_product("ITM001", "Whole Milk 1L", "dairy", "Fresh Farms", 2.1, 3.5)
    catalog.add_product("ITM002", "Sourdough Loaf", "bakery", "Village Bakery", 1.8, 4.25)
    return StockLedger(catalog)


def test_quantity_defaults_to_zero(ledger):
    assert ledger.quantity_at("STORE001", "ITM001") == 0
    assert ledger.total_across_locations("ITM001") == 0
    assert ledger.locations_for("ITM001") == {}


def test_adjust_returns_new_quantity(ledger):
    assert ledger.adjust("STORE001", "ITM001", 100) == 100
    assert ledger.adjust("STORE001", "ITM001", -30) == 70
    assert ledger.quantity_at("STORE001", "ITM001") == 70


def test_adjust_unknown_product_raises(ledger):
    with pytest.raises(NotFoundError):
        ledger.adjust("STORE001", "NOPE", 5)
    assert ledger.locations_for("NOPE") == {}


def test_adjust_below_zero_is_rejected_and_ledger_unchanged(ledger, caplog):
    ledger.adjust("STORE001", "ITM001", 70)

    with caplog.at_level(logging.WARNING):
        with pytest.raises(InsufficientStockError) as exc_info:
            ledger.adjust("STORE001", "ITM001", -200)

    assert exc_info.value.available == 70
    assert exc_info.value.requested == 200
    assert ledger.quantity_at("STORE001", "ITM001") == 70
    assert "Rejected adjustment" in caplog.text

    # Failing again leaves the same state
    with pytest.raises(InsufficientStockError):
        ledger.adjust("STORE001", "ITM001", -200)
    assert ledger.quantity_at("STORE001", "ITM001") == 70


def test_adjust_to_exactly_zero_is_allowed(ledger):
    ledger.adjust("STORE001", "ITM001", 5)
    assert ledger.adjust("STORE001", "ITM001", -5) == 0


def test_negative_adjustment_on_empty_location_is_rejected(ledger):
    with pytest.raises(InsufficientStockError):
        ledger.adjust("STORE009", "ITM001", -1)
    assert ledger.locations_for("ITM001") == {}


def test_total_equals_sum_of_committed_deltas(ledger):
    deltas = [("STORE001", 40), ("STORE002", 25), ("STORE001", -10), ("WH001", 300), ("STORE002", -25)]
    for location, delta in deltas:
        ledger.adjust(location, "ITM001", delta)

    # A rejected delta is not part of the total
    with pytest.raises(InsufficientStockError):
        ledger.adjust("STORE002", "ITM001", -1)

    assert ledger.total_across_locations("ITM001") == sum(d for _, d in deltas)
    assert ledger.locations_for("ITM001") == {"STORE001": 30, "STORE002": 0, "WH001": 300}
    assert ledger.total_across_locations("ITM002") == 0


def test_lock_for_returns_same_lock_per_product(ledger):
    assert ledger.lock_for("ITM001") is ledger.lock_for("ITM001")
    assert ledger.lock_for("ITM001") is not ledger.lock_for("ITM002")


def test_reads_of_unknown_products_create_no_locks(ledger):
    for i in range(1000):
        assert ledger.quantity_at("STORE001", f"UNKNOWN{i}") == 0
        assert ledger.total_across_locations(f"UNKNOWN{i}") == 0
        assert ledger.locations_for(f"UNKNOWN{i}") == {}

    assert len(ledger._locks) == 0


def test_lock_for_unknown_product_raises(ledger):
    with pytest.raises(NotFoundError):
        ledger.lock_for("NOPE")
    assert "NOPE" not in ledger._locks
