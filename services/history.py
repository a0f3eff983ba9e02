"""
Append-only log of inventory operations.
"""

import logging
import threading
from collections.abc import Iterator

from models.enums import OperationType
from models.inventory import InventoryOperation

logger = logging.getLogger(__name__)


class OperationHistory:
    """
    Append-only record of InventoryOperation entries, queryable by product.
    Records are never mutated or removed.
    """

    def __init__(self):
        self._operations: list[InventoryOperation] = []
        self._lock = threading.Lock()

    def append(self, operation: InventoryOperation) -> InventoryOperation:
        """Append an already-built operation and return it."""
        if not isinstance(operation, InventoryOperation):
            raise TypeError(f"Expected InventoryOperation, got {type(operation).__name__}")
        with self._lock:
            self._operations.append(operation)
        logger.debug(
            f"Recorded {operation.operation_type.value} for {operation.product_id} "
            f"(quantity={operation.quantity})"
        )
        return operation

    def record(
        self,
        operation_type: OperationType,
        product_id: str,
        quantity: int,
        note: str = "",
        location_id: str | None = None,
        destination_location_id: str | None = None,
    ) -> InventoryOperation:
        """Build an operation from its fields and append it."""
        operation = InventoryOperation(
            operation_type=operation_type,
            product_id=product_id,
            quantity=quantity,
            note=note,
            location_id=location_id,
            destination_location_id=destination_location_id,
        )
        return self.append(operation)

    def history_for(self, product_id: str) -> list[InventoryOperation]:
        """Return every operation for a product, in insertion order."""
        with self._lock:
            return [op for op in self._operations if op.product_id == product_id]

    def by_type(self, operation_type: OperationType) -> list[InventoryOperation]:
        with self._lock:
            return [op for op in self._operations if op.operation_type == operation_type]

    def __len__(self) -> int:
        with self._lock:
            return len(self._operations)

    def __iter__(self) -> Iterator[InventoryOperation]:
        with self._lock:
            snapshot = list(self._operations)
        return iter(snapshot)
