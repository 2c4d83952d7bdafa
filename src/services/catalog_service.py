# src/services/catalog_service.py

"""Request-scoped catalog pipeline: load, price, filter."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from src.config.settings import Settings
from src.filters.catalog_filter import CatalogFilter
from src.models.filter_criteria import FilterCriteria
from src.models.gold_price import GoldPriceQuote
from src.models.product import PricedProduct
from src.pricing.calculator import price_catalog
from src.services.gold_price import GoldPriceHolder
from src.storage.catalog_loader import CatalogLoader

logger = logging.getLogger("ring_catalog.catalog")


@dataclass
class CatalogResult:
    """Products returned for one catalog request."""

    gold_price: float
    products: list[PricedProduct] = field(default_factory=list)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)

    @property
    def total_products(self) -> int:
        return len(self.products)

    def to_payload(self) -> dict[str, Any]:
        """Serialise in the API response shape."""
        return {
            "success": True,
            "data": [p.to_payload() for p in self.products],
            "goldPrice": self.gold_price,
            "totalProducts": self.total_products,
        }


class CatalogService:
    """Serves priced, filtered catalog listings and gold price quotes."""

    def __init__(
        self,
        loader: CatalogLoader | None = None,
        price_holder: GoldPriceHolder | None = None,
    ) -> None:
        self.loader = loader or CatalogLoader()
        self.price_holder = price_holder or GoldPriceHolder()

    def list_products(
        self, criteria: FilterCriteria | None = None
    ) -> CatalogResult:
        """Price the whole catalog at the current gold price and filter it."""
        criteria = criteria or FilterCriteria()
        gold_price = self.price_holder.snapshot()

        priced = price_catalog(self.loader.load(), gold_price)
        products = CatalogFilter.filter_catalog(priced, criteria)

        logger.info(
            "Catalog request: %d of %d products at $%.2f/gram (filters=%s)",
            len(products),
            len(priced),
            gold_price,
            criteria.to_params(),
        )
        return CatalogResult(
            gold_price=gold_price, products=products, criteria=criteria
        )

    def gold_price_quote(self) -> GoldPriceQuote:
        """Return the current gold price with its read timestamp."""
        return GoldPriceQuote(
            gold_price=self.price_holder.snapshot(),
            currency=Settings.CURRENCY,
            unit=Settings.PRICE_UNIT,
            last_updated=datetime.now(timezone.utc),
        )
