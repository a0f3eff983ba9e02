"""
Product catalog data models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """
    Data model for a catalog product. Products are create-only, so the
    dataclass is frozen.
    """

    product_id: str
    name: str
    category: str
    supplier: str
    cost_price: float
    selling_price: float
    popularity_score: float = 0.0


@dataclass(frozen=True)
class ScoredProduct:
    """A product paired with the score a recommendation scorer gave it."""

    product: Product
    score: float
