# src/models/filter_criteria.py

"""Optional numeric bounds for catalog filtering."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class FilterCriteria:
    """Inclusive price and popularity bounds; ``None`` means unbounded."""

    min_price: float | None = None
    max_price: float | None = None
    min_popularity: float | None = None
    max_popularity: float | None = None

    @property
    def is_empty(self) -> bool:
        """True when no bound is set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_params(self) -> dict[str, float]:
        """Return the present bounds keyed by their query parameter names."""
        params = {
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
            "minPopularity": self.min_popularity,
            "maxPopularity": self.max_popularity,
        }
        return {k: v for k, v in params.items() if v is not None}
