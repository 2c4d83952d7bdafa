# src/filters/catalog_filter.py

"""Price and popularity range filtering over priced catalog records."""

import logging

from src.models.filter_criteria import FilterCriteria
from src.models.product import PricedProduct

logger = logging.getLogger("ring_catalog.filters")


class CatalogFilter:
    """Apply inclusive numeric bounds to priced products."""

    @staticmethod
    def matches(product: PricedProduct, criteria: FilterCriteria) -> bool:
        """Return True when *product* satisfies every present bound."""
        if criteria.min_price is not None and product.price < criteria.min_price:
            return False
        if criteria.max_price is not None and product.price > criteria.max_price:
            return False
        if (
            criteria.min_popularity is not None
            and product.popularity_score < criteria.min_popularity
        ):
            return False
        if (
            criteria.max_popularity is not None
            and product.popularity_score > criteria.max_popularity
        ):
            return False
        return True

    @staticmethod
    def filter_catalog(
        products: list[PricedProduct],
        criteria: FilterCriteria,
    ) -> list[PricedProduct]:
        """Keep the products matching all bounds, in their original order."""
        if criteria.is_empty:
            return list(products)

        kept = [p for p in products if CatalogFilter.matches(p, criteria)]

        excluded = len(products) - len(kept)
        if excluded:
            logger.debug(
                "Filtered out %d of %d products (%s)",
                excluded,
                len(products),
                criteria.to_params(),
            )

        return kept
