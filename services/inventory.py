"""
Inventory core for the retail inventory project.
Defines the InventoryManager class, which owns the stock ledger and operation
history and implements transfers, low-stock alerting, replenishment
recommendations and purchase-plan generation.
"""

import logging
import math
from collections.abc import Callable
from datetime import date, timedelta

from config.config import InventoryConfig
from connectors.audit_sink import AuditSink, FileAuditSink
from connectors.history_source import HistorySource, InMemoryHistorySource
from models.enums import OperationType
from models.inventory import InventoryOperation, PurchasePlan, ReplenishmentRecommendation
from models.product import Product
from services.catalog import Catalog
from services.errors import InvalidArgumentError
from services.history import OperationHistory
from services.ledger import StockLedger
from utils.alerts import AlertNotifier

# Set up logging
logger = logging.getLogger(__name__)


class InventoryManager:
    """
    Orchestrates stock across stores and warehouses.

    The manager exclusively owns its StockLedger and OperationHistory; the
    Catalog may be shared with other read-only collaborators such as the
    recommendation scorer.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        notifier: AlertNotifier | None = None,
        history_source: HistorySource | None = None,
        audit_sink: AuditSink | None = None,
        config: InventoryConfig | None = None,
        clock: Callable[[], date] = date.today,
    ):
        self.config = config or InventoryConfig()
        self.catalog = catalog if catalog is not None else Catalog()
        self.history = OperationHistory()
        self.ledger = StockLedger(self.catalog)
        self.notifier = notifier if notifier is not None else AlertNotifier()
        self.history_source = history_source if history_source is not None else InMemoryHistorySource(clock)
        if audit_sink is None and self.config.audit_log_path:
            audit_sink = FileAuditSink(self.config.audit_log_path)
        self.audit_sink = audit_sink
        self._clock = clock

    # --- Catalog and ledger passthroughs --- #

    def add_product(
        self,
        product_id: str,
        name: str,
        category: str,
        supplier: str,
        cost_price: float,
        selling_price: float,
        popularity_score: float = 0.0,
    ) -> Product:
        """Register a product in the catalog and record an ADD_ITEM operation in this manager's history."""
        product = self.catalog.add_product(
            product_id, name, category, supplier, cost_price, selling_price, popularity_score
        )
        self.history.record(OperationType.ADD_ITEM, product_id, 0, note=f"Added product {name}")
        return product

    def get_product(self, product_id: str) -> Product:
        return self.catalog.get(product_id)

    def quantity_at(self, location_id: str, product_id: str) -> int:
        return self.ledger.quantity_at(location_id, product_id)

    def total_across_locations(self, product_id: str) -> int:
        return self.ledger.total_across_locations(product_id)

    def history_for(self, product_id: str) -> list[InventoryOperation]:
        return self.history.history_for(product_id)

    # --- Mutations --- #

    def update_stock(self, location_id: str, product_id: str, delta: int, note: str = "") -> int:
        """
        Adjust stock at one location and record an UPDATE_STOCK operation.

        Returns:
            int: The new quantity at the location.
        """
        with self.ledger.lock_for(product_id):
            new_quantity = self.ledger.adjust(location_id, product_id, delta)
            self.history.record(
                OperationType.UPDATE_STOCK,
                product_id,
                delta,
                note=note or f"Stock at {location_id} adjusted by {delta}",
                location_id=location_id,
            )
        logger.info(f"Stock for {product_id} at {location_id} is now {new_quantity}")
        return new_quantity

    def transfer(self, from_location: str, to_location: str, product_id: str, quantity: int) -> InventoryOperation:
        """
        Move stock between two locations as a single logical step.

        The debit runs first; if the source lacks stock the transfer aborts
        before the destination is touched. Both adjustments happen under the
        product's lock, so no other mutation can observe the half-done state.

        Raises:
            InvalidArgumentError: if quantity is not positive or both locations are the same.
            NotFoundError: if the product is unknown.
            InsufficientStockError: if the source holds fewer than quantity units.
        """
        if quantity <= 0:
            raise InvalidArgumentError(f"Transfer quantity must be positive, got {quantity}")
        if from_location == to_location:
            raise InvalidArgumentError(f"Cannot transfer {product_id} from {from_location} to itself")
        self.catalog.get(product_id)

        with self.ledger.lock_for(product_id):
            self.ledger.adjust(from_location, product_id, -quantity)
            self.ledger.adjust(to_location, product_id, quantity)
            operation = self.history.record(
                OperationType.TRANSFER,
                product_id,
                quantity,
                note=f"Transferred {quantity} units from {from_location} to {to_location}",
                location_id=from_location,
                destination_location_id=to_location,
            )

        logger.info(f"Transferred {quantity} units of {product_id} from {from_location} to {to_location}")
        self._write_audit(operation)
        return operation

    def _write_audit(self, operation: InventoryOperation) -> None:
        if self.audit_sink is None:
            return
        line = (
            f"{operation.timestamp.isoformat()} | {operation.operation_type.value} | "
            f"{operation.product_id} | {operation.quantity} | {operation.note}"
        )
        try:
            self.audit_sink.write(line)
        except Exception as e:
            logger.error(f"Failed to write audit line for operation {operation.operation_id}: {e}")

    # --- Alerting and planning --- #

    def check_low_stock(self, threshold: int | None = None) -> list[str]:
        """
        Publish an alert for every product whose total stock is below threshold.

        Alerts are not deduplicated: repeated calls re-fire for products that
        are still low.

        Returns:
            list[str]: The alert messages that were published.
        """
        if threshold is None:
            threshold = self.config.default_low_stock_threshold
        messages = []
        for product in self.catalog:
            stock = self.ledger.total_across_locations(product.product_id)
            if stock < threshold:
                message = (
                    f"Low stock alert: {product.name} ({product.product_id}) has {stock} units, "
                    f"below threshold {threshold}"
                )
                logger.warning(message)
                self.notifier.publish(message)
                messages.append(message)
        return messages

    def recommend(self, location_id: str, threshold: int) -> list[ReplenishmentRecommendation]:
        """
        Suggest reorder quantities for products at or below threshold at a location.
        The target level is threshold * replenishment_factor, truncated toward zero.
        """
        target = int(threshold * self.config.replenishment_factor)
        recommendations = []
        for product in self.catalog:
            current = self.ledger.quantity_at(location_id, product.product_id)
            if current <= threshold:
                recommendations.append(
                    ReplenishmentRecommendation(
                        product_id=product.product_id,
                        name=product.name,
                        current_quantity=current,
                        recommended_quantity=target - current,
                        supplier=product.supplier,
                    )
                )
        logger.debug(f"{len(recommendations)} replenishment recommendation(s) for {location_id}")
        return recommendations

    def average_daily_consumption(self, product_id: str) -> float:
        """Mean signed consumption over the configured history window; 0.0 with no records."""
        records = list(self.history_source.get_records(product_id, self.config.max_history_days))
        if not records:
            return 0.0
        return sum(r.quantity_changed for r in records) / len(records)

    def generate_purchase_plans(self, batch_size: int, threshold: int) -> list[PurchasePlan]:
        """
        Plan purchases for products projected to fall to threshold within the restock horizon.

        days_to_restock = ceil((threshold - current_stock) / avg_daily_consumption).
        Products with no consumption produce no plan; negative day counts are
        compared against the horizon as-is.
        """
        today = self._clock()
        plans = []
        for product in self.catalog:
            avg = self.average_daily_consumption(product.product_id)
            if avg == 0:
                continue
            current = self.ledger.total_across_locations(product.product_id)
            days_to_restock = math.ceil((threshold - current) / avg)
            if days_to_restock <= self.config.restock_horizon_days:
                plans.append(
                    PurchasePlan(
                        product_id=product.product_id,
                        name=product.name,
                        batch_size=batch_size,
                        restock_date=_shift_date(today, days_to_restock),
                    )
                )
        logger.info(f"Generated {len(plans)} purchase plan(s) for {today.isoformat()}")
        return plans


def _shift_date(start: date, days: int) -> date:
    """Add days to a date, clamping to date.min / date.max instead of overflowing."""
    try:
        return start + timedelta(days=days)
    except OverflowError:
        clamped = date.max if days > 0 else date.min
        logger.warning(f"Restock date {days} days from {start.isoformat()} is out of range; using {clamped.isoformat()}")
        return clamped
