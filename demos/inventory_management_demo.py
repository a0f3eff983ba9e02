"""
Demo script for the inventory core.

Registers a few products, stocks two stores, moves stock between them, and
prints low-stock alerts, replenishment recommendations and purchase plans.
"""

from connectors.audit_sink import InMemoryAuditSink
from connectors.history_source import InMemoryHistorySource
from connectors.notifications import DummyEmailService, DummySmsService
from services.errors import InsufficientStockError
from services.inventory import InventoryManager
from services.recommendation import RecommendationScorer
from utils.alerts import AlertNotifier
from utils.logger import get_logger

logger = get_logger(__name__)


def build_demo_manager() -> tuple[InventoryManager, InMemoryAuditSink]:
    notifier = AlertNotifier()
    notifier.subscribe(DummySmsService("+1-555-0100"))
    notifier.subscribe(DummyEmailService("store-ops@example.com"))

    history_source = InMemoryHistorySource()
    history_source.add_daily_series("ITM001", [8, 10, 12, 9, 11, 10, 10])
    history_source.add_daily_series("ITM002", [1, 0, 2, 1, 1, 0, 2])

    audit_sink = InMemoryAuditSink()
    manager = InventoryManager(notifier=notifier, history_source=history_source, audit_sink=audit_sink)

    manager.add_product("ITM001", "Whole Milk 1L", "dairy", "Fresh Farms", 2.1, 3.5, popularity_score=0.9)
    manager.add_product("ITM002", "Sourdough Loaf", "bakery", "Village Bakery", 1.8, 4.25, popularity_score=0.6)
    manager.add_product("ITM003", "Espresso Beans 500g", "coffee", "Roast Co", 6.0, 11.99, popularity_score=0.75)

    manager.update_stock("STORE001", "ITM001", 100, note="Initial delivery")
    manager.update_stock("STORE001", "ITM002", 8, note="Initial delivery")
    manager.update_stock("STORE002", "ITM003", 40, note="Initial delivery")
    return manager, audit_sink


def run_demo():
    manager, audit_sink = build_demo_manager()

    manager.transfer("STORE001", "STORE002", "ITM001", 30)
    logger.info(f"ITM001 by location after transfer: {manager.ledger.locations_for('ITM001')}")

    try:
        manager.update_stock("STORE001", "ITM001", -200)
    except InsufficientStockError as e:
        logger.info(f"Rejected as expected: {e}")

    alerts = manager.check_low_stock(threshold=10)
    recommendations = manager.recommend("STORE002", threshold=10)
    plans = manager.generate_purchase_plans(batch_size=50, threshold=80)

    scorer = RecommendationScorer(manager.catalog)
    top = scorer.recommend(preferred_categories={"coffee"}, limit=2)

    print("\nAlerts:")
    for message in alerts:
        print(f"  {message}")
    print("\nReplenishment for STORE002:")
    for rec in recommendations:
        print(f"  {rec.product_id} ({rec.name}): have {rec.current_quantity}, order {rec.recommended_quantity} from {rec.supplier}")
    print("\nPurchase plans:")
    for plan in plans:
        print(f"  {plan.product_id}: {plan.batch_size} units by {plan.restock_date.isoformat()}")
    print("\nRecommended for a coffee lover:")
    for item in top:
        print(f"  {item.product.name}: {item.score:.2f}")
    print("\nAudit trail:")
    for line in audit_sink.lines:
        print(f"  {line}")

    return manager


if __name__ == "__main__":
    run_demo()
