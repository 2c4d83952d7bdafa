# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_fallback_gold_price(self) -> None:
        """The gold price starts at $65.50/gram."""
        self.assertEqual(Settings.FALLBACK_GOLD_PRICE, 65.50)

    def test_volatility_smaller_than_fallback(self) -> None:
        """Simulated prices can never reach zero."""
        self.assertGreater(Settings.GOLD_PRICE_VOLATILITY, 0)
        self.assertLess(
            Settings.GOLD_PRICE_VOLATILITY / 2,
            Settings.FALLBACK_GOLD_PRICE,
        )

    def test_refresh_interval_positive(self) -> None:
        self.assertIsInstance(Settings.GOLD_PRICE_REFRESH_INTERVAL, float)
        self.assertGreater(Settings.GOLD_PRICE_REFRESH_INTERVAL, 0)

    def test_currency_labels(self) -> None:
        self.assertEqual(Settings.CURRENCY, "USD")
        self.assertEqual(Settings.PRICE_UNIT, "per gram")

    def test_port_is_int(self) -> None:
        self.assertIsInstance(Settings.PORT, int)
        self.assertGreater(Settings.PORT, 0)

    def test_image_variants(self) -> None:
        self.assertEqual(
            Settings.IMAGE_VARIANTS, ("yellow", "rose", "white")
        )

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.CATALOG_PATH, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_bundled_catalog_exists(self) -> None:
        """The sample products.json ships with the repo."""
        self.assertTrue(
            (Settings.BASE_DIR / "data" / "products.json").exists()
        )


if __name__ == "__main__":
    unittest.main()
