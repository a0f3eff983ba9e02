"""
Module: connectors.history_source

Provides the consumption-history port used for purchase planning, plus an
in-memory implementation for tests and demos.
"""

from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import date, timedelta
from typing import Protocol

from models.inventory import ConsumptionRecord


class HistorySource(Protocol):
    """Supplies per-day consumption records for a product."""

    def get_records(self, product_id: str, max_days: int) -> Iterable[ConsumptionRecord]: ...


class InMemoryHistorySource:
    """
    In-memory consumption history keyed by product id.
    Only records dated within the last max_days days (relative to the clock) are returned.
    """

    def __init__(self, clock: Callable[[], date] = date.today):
        self._clock = clock
        self._records: dict[str, list[ConsumptionRecord]] = defaultdict(list)

    def add_record(self, product_id: str, record_date: date, quantity_changed: int) -> ConsumptionRecord:
        record = ConsumptionRecord(date=record_date, quantity_changed=quantity_changed)
        self._records[product_id].append(record)
        return record

    def add_daily_series(self, product_id: str, quantities: list[int]) -> None:
        """Record one value per day, the last one dated today."""
        today = self._clock()
        for offset, quantity in enumerate(reversed(quantities)):
            self.add_record(product_id, today - timedelta(days=offset), quantity)

    def get_records(self, product_id: str, max_days: int) -> list[ConsumptionRecord]:
        cutoff = self._clock() - timedelta(days=max_days)
        return [r for r in self._records.get(product_id, []) if r.date > cutoff]
