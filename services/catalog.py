"""
Product catalog shared by the inventory core and the recommendation scorer.
"""

import logging
import threading
from collections.abc import Iterator

from models.product import Product
from services.errors import DuplicateKeyError, NotFoundError

logger = logging.getLogger(__name__)


class Catalog:
    """
    Holds immutable product definitions keyed by product id.

    The catalog keeps no history of its own; the inventory core that adds a
    product records the ADD_ITEM operation in the log it owns.
    """

    def __init__(self):
        self._products: dict[str, Product] = {}
        self._lock = threading.Lock()

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
        """
        Create and register a product.

        Raises:
            DuplicateKeyError: if a product with the same id already exists.
        """
        product = Product(
            product_id=product_id,
            name=name,
            category=category,
            supplier=supplier,
            cost_price=cost_price,
            selling_price=selling_price,
            popularity_score=popularity_score,
        )
        with self._lock:
            if product_id in self._products:
                logger.warning(f"Rejected duplicate product id {product_id}")
                raise DuplicateKeyError("Product", product_id)
            self._products[product_id] = product

        logger.info(f"Added product {product_id} ({name}) to catalog")
        return product

    def get(self, product_id: str) -> Product:
        """Return the product with the given id or raise NotFoundError."""
        try:
            return self._products[product_id]
        except KeyError:
            raise NotFoundError("Product", product_id) from None

    def products(self) -> list[Product]:
        """Return all products in insertion order."""
        with self._lock:
            return list(self._products.values())

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products())
