# src/models/gold_price.py

"""Point-in-time gold price quote model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class GoldPriceQuote:
    """The reference unit price as read at a given moment."""

    gold_price: float
    currency: str
    unit: str
    last_updated: datetime

    def to_payload(self) -> dict[str, Any]:
        """Serialise for the API response."""
        return {
            "success": True,
            "goldPrice": self.gold_price,
            "currency": self.currency,
            "unit": self.unit,
            "lastUpdated": self.last_updated.isoformat(),
        }
