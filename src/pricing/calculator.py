# src/pricing/calculator.py

"""Gold-linked price and star rating derivation for catalog records.

All arithmetic runs on :class:`~decimal.Decimal` values built from the
shortest ``repr`` of each float, so a price that is exactly ``x.xx5`` in
decimal rounds up instead of falling victim to binary representation
error (``round(1.005, 2) == 1.0`` in plain float maths).
"""

from decimal import ROUND_HALF_UP, Decimal

from src.models.product import PricedProduct, RawProduct

_ONE = Decimal(1)
_STARS = Decimal(5)


def _dec(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def _quantize(value: Decimal, places: int) -> float:
    # ROUND_HALF_UP in the decimal module rounds half away from zero.
    return float(value.quantize(_ONE.scaleb(-places), rounding=ROUND_HALF_UP))


def round_half_up(value: float, places: int) -> float:
    """Round *value* to *places* decimals, halves away from zero."""
    return _quantize(_dec(value), places)


def compute_price(
    popularity_score: float, weight: float, reference_unit_price: float
) -> float:
    """Return ``(popularity_score + 1) * weight * reference_unit_price``.

    Rounded to cents.  Inputs are not validated.
    """
    raw = (
        (_dec(popularity_score) + _ONE)
        * _dec(weight)
        * _dec(reference_unit_price)
    )
    return _quantize(raw, 2)


def compute_star_rating(popularity_score: float) -> float:
    """Map a 0–1 popularity score onto a 0–5 star scale (one decimal)."""
    return _quantize(_dec(popularity_score) * _STARS, 1)


def price_catalog(
    raw_records: list[RawProduct], reference_unit_price: float
) -> list[PricedProduct]:
    """Price and rate every record, preserving input order."""
    return [
        PricedProduct.from_raw(
            raw,
            price=compute_price(
                raw.popularity_score, raw.weight, reference_unit_price
            ),
            star_rating=compute_star_rating(raw.popularity_score),
        )
        for raw in raw_records
    ]
