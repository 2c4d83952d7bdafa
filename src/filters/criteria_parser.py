# src/filters/criteria_parser.py

"""Turn loosely-typed request parameters into FilterCriteria."""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from src.models.filter_criteria import FilterCriteria

logger = logging.getLogger("ring_catalog.filters")

PARAM_NAMES: dict[str, str] = {
    "minPrice": "min_price",
    "maxPrice": "max_price",
    "minPopularity": "min_popularity",
    "maxPopularity": "max_popularity",
}

# Plain ASCII decimal literal, optional exponent. float() alone would also
# take "1_000", "inf" and non-ASCII digits such as "１２".
_DECIMAL_RE = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)


def parse_bound(value: Any) -> float | None:
    """Parse one bound; anything that is not a finite number is absent.

    Strings must be plain decimal literals such as ``"250"``, ``"-5"``,
    ``".5"`` or ``"1e3"``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if not _DECIMAL_RE.fullmatch(value):
            logger.debug("Ignoring non-numeric filter bound %r", value)
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric filter bound %r", value)
        return None
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite filter bound %r", value)
        return None
    return number


def parse_filter_params(params: Mapping[str, Any]) -> FilterCriteria:
    """Build criteria from the four camelCase bound parameters."""
    return FilterCriteria(
        **{
            attr: parse_bound(params.get(key))
            for key, attr in PARAM_NAMES.items()
        }
    )
