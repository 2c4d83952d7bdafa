# src/models/product.py

"""Catalog product records: raw entries and their priced counterparts."""

import math
from dataclasses import dataclass, field
from typing import Any


def _require_number(record: dict[str, Any], key: str) -> float:
    """Read a numeric field from a raw catalog record."""
    value = record.get(key)
    # bool is an int subclass but never a valid score or weight
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key!r} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{key!r} must be finite, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class RawProduct:
    """A catalog entry as loaded from the static source file."""

    name: str
    popularity_score: float
    weight: float
    images: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, record: Any) -> "RawProduct":
        """Build a record from its JSON form.

        Raises:
            ValueError: if *record* is not an object or lacks a
                required field.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Catalog record must be an object, got {record!r}")

        name = record.get("name")
        if not isinstance(name, str):
            raise ValueError(f"'name' must be a string, got {name!r}")

        images = record.get("images", {})
        if not isinstance(images, dict) or not all(
            isinstance(k, str) and isinstance(v, str)
            for k, v in images.items()
        ):
            raise ValueError(f"'images' must map variants to strings in {name!r}")

        return cls(
            name=name,
            popularity_score=_require_number(record, "popularityScore"),
            weight=_require_number(record, "weight"),
            images=dict(images),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialise with the catalog's camelCase keys."""
        return {
            "name": self.name,
            "popularityScore": self.popularity_score,
            "weight": self.weight,
            "images": dict(self.images),
        }


@dataclass(frozen=True)
class PricedProduct:
    """A catalog entry with its request-time price and star rating."""

    name: str
    popularity_score: float
    weight: float
    price: float
    star_rating: float
    images: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_raw(
        cls, raw: RawProduct, price: float, star_rating: float
    ) -> "PricedProduct":
        """Attach derived values to a raw record."""
        return cls(
            name=raw.name,
            popularity_score=raw.popularity_score,
            weight=raw.weight,
            price=price,
            star_rating=star_rating,
            images=dict(raw.images),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialise for the API response."""
        return {
            "name": self.name,
            "popularityScore": self.popularity_score,
            "weight": self.weight,
            "images": dict(self.images),
            "price": self.price,
            "starRating": self.star_rating,
        }
