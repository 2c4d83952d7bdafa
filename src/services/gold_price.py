# src/services/gold_price.py

"""Simulated gold price feed and the process-wide price holder."""

import asyncio
import logging
import math
import random
import threading
from collections.abc import Callable

from src.config.settings import Settings
from src.pricing.calculator import round_half_up

logger = logging.getLogger("ring_catalog.gold_price")


class GoldPriceHolder:
    """Single-writer, multi-reader holder for the per-gram gold price.

    Readers call :meth:`snapshot` once per computation and use that value
    throughout; only :class:`GoldPriceRefresher` calls :meth:`update`.
    """

    def __init__(self, initial: float = Settings.FALLBACK_GOLD_PRICE) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def snapshot(self) -> float:
        """Return the current price."""
        with self._lock:
            return self._value

    def update(self, value: float) -> None:
        """Replace the current price."""
        with self._lock:
            self._value = value


def simulate_gold_price(
    base: float = Settings.FALLBACK_GOLD_PRICE,
    volatility: float = Settings.GOLD_PRICE_VOLATILITY,
    rng: random.Random | None = None,
) -> float:
    """Return *base* shifted by up to ±``volatility / 2``, rounded to cents."""
    draw = (rng or random).random()
    return round_half_up(base + (draw - 0.5) * volatility, 2)


class GoldPriceRefresher:
    """Pulls a fresh price into a :class:`GoldPriceHolder`.

    A failed fetch leaves the previous value in place; the next
    scheduled tick simply tries again.
    """

    def __init__(
        self,
        holder: GoldPriceHolder,
        fetch: Callable[[], float] = simulate_gold_price,
    ) -> None:
        self.holder = holder
        self._fetch = fetch

    def refresh(self) -> bool:
        """Fetch and store a new price.  Returns False on failure."""
        try:
            price = float(self._fetch())
        except Exception:
            logger.error(
                "Error fetching gold price; keeping $%.2f/gram",
                self.holder.snapshot(),
                exc_info=True,
            )
            return False

        if not math.isfinite(price) or price <= 0:
            logger.error(
                "Rejected gold price %r; keeping $%.2f/gram",
                price,
                self.holder.snapshot(),
            )
            return False

        self.holder.update(price)
        logger.info("Gold price updated: $%.2f/gram", price)
        return True

    async def run_periodically(self, interval: float) -> None:
        """Refresh every *interval* seconds until cancelled."""
        logger.info("Gold price refresh scheduled every %.0fs", interval)
        while True:
            await asyncio.sleep(interval)
            await asyncio.to_thread(self.refresh)
