"""
Per-location stock ledger.
Tracks a non-negative integer quantity for every (product, location) pair.
"""

import logging
import threading
from collections import defaultdict

from services.catalog import Catalog
from services.errors import InsufficientStockError, NotFoundError

logger = logging.getLogger(__name__)


class StockLedger:
    """
    Stock quantities keyed by product id and location id.

    A missing entry means zero stock. Every mutation is guarded by a
    re-entrant lock scoped to the product, so callers that need several
    adjustments to appear as one (e.g. a transfer) can hold the same lock
    via lock_for().
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        # product_id -> {location_id: quantity}
        self._stock: dict[str, dict[str, int]] = defaultdict(dict)
        self._locks: dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    def lock_for(self, product_id: str) -> threading.RLock:
        """
        Return the lock guarding a product's entries, creating it on first use.

        Raises:
            NotFoundError: if the product is not in the catalog, so unknown ids never get a lock.
        """
        if product_id not in self.catalog:
            raise NotFoundError("Product", product_id)
        with self._registry_lock:
            lock = self._locks.get(product_id)
            if lock is None:
                lock = threading.RLock()
                self._locks[product_id] = lock
            return lock

    def adjust(self, location_id: str, product_id: str, delta: int) -> int:
        """
        Apply a signed delta to a product's stock at a location.

        Returns:
            int: The new quantity at the location.

        Raises:
            NotFoundError: if the product is not in the catalog.
            InsufficientStockError: if the result would be negative. The
                ledger is left unchanged.
        """
        if product_id not in self.catalog:
            raise NotFoundError("Product", product_id)

        with self.lock_for(product_id):
            entries = self._stock[product_id]
            current = entries.get(location_id, 0)
            new_quantity = current + delta
            if new_quantity < 0:
                logger.warning(
                    f"Rejected adjustment of {delta} for {product_id} at {location_id}: only {current} available"
                )
                raise InsufficientStockError(product_id, location_id, available=current, requested=-delta)
            entries[location_id] = new_quantity

        logger.debug(f"Stock for {product_id} at {location_id}: {current} -> {new_quantity}")
        return new_quantity

    def quantity_at(self, location_id: str, product_id: str) -> int:
        """Return the quantity at a location, 0 when nothing is tracked there."""
        return self._entries(product_id).get(location_id, 0)

    def total_across_locations(self, product_id: str) -> int:
        """Return the sum of a product's stock over every location it is tracked at."""
        return sum(self._entries(product_id).values())

    def locations_for(self, product_id: str) -> dict[str, int]:
        """Return a copy of a product's per-location quantities."""
        return self._entries(product_id)

    def _entries(self, product_id: str) -> dict[str, int]:
        # Products outside the catalog hold no stock; reading them takes no lock
        if product_id not in self.catalog:
            return {}
        with self.lock_for(product_id):
            return dict(self._stock.get(product_id, {}))
