"""
Deterministic product recommendation scorer for retail shoppers.
"""

import logging
from collections.abc import Collection

from config.config import RecommendationConfig
from models.product import Product, ScoredProduct
from services.catalog import Catalog
from services.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class RecommendationScorer:
    """
    Ranks catalog products for a shopper by combining each product's static
    popularity with bonuses for the shopper's preferred categories and brands.

    score = popularity_weight * popularity_score
            + category_weight  (if the category is preferred)
            + brand_weight     (if the supplier/brand is preferred)
    """

    def __init__(self, catalog: Catalog, config: RecommendationConfig | None = None):
        self.catalog = catalog
        self.config = config or RecommendationConfig()
        logger.info(f"Recommendation scorer initialized with {len(catalog)} products")

    def score(
        self,
        product: Product,
        preferred_categories: Collection[str] = (),
        preferred_brands: Collection[str] = (),
    ) -> float:
        value = self.config.popularity_weight * product.popularity_score
        if product.category in preferred_categories:
            value += self.config.category_weight
        if product.supplier in preferred_brands:
            value += self.config.brand_weight
        return value

    def recommend(
        self,
        preferred_categories: Collection[str] = (),
        preferred_brands: Collection[str] = (),
        limit: int | None = None,
        exclude: Collection[str] = (),
    ) -> list[ScoredProduct]:
        """
        Return up to limit products, highest score first.
        Ties are broken by product id so results are stable.
        """
        if limit is None:
            limit = self.config.default_limit
        if limit <= 0:
            raise InvalidArgumentError(f"Recommendation limit must be positive, got {limit}")

        scored = [
            ScoredProduct(product=p, score=self.score(p, preferred_categories, preferred_brands))
            for p in self.catalog
            if p.product_id not in exclude
        ]
        scored.sort(key=lambda s: (-s.score, s.product.product_id))
        top = scored[:limit]
        logger.debug(f"Top recommendations: {[s.product.product_id for s in top]}")
        return top
