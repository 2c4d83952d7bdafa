# tests/test_catalog_loader.py

"""Tests for the CatalogLoader static file reader."""

import json
import tempfile
import unittest
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.storage.catalog_loader import CatalogLoader


class TestCatalogLoader(unittest.TestCase):
    """Loading and failure containment."""

    def setUp(self) -> None:
        """Create a temp directory for catalog files."""
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp_dir = Path(self._tmp.name)

    def _write(self, content: Any, raw: bool = False) -> Path:
        path = self.tmp_dir / "products.json"
        text = content if raw else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    def test_loads_records_in_order(self) -> None:
        path = self._write(
            [
                {"name": "B", "popularityScore": 0.5, "weight": 2},
                {"name": "A", "popularityScore": 0.1, "weight": 1},
            ]
        )
        products = CatalogLoader(path).load()
        self.assertEqual([p.name for p in products], ["B", "A"])

    def test_empty_array(self) -> None:
        self.assertEqual(CatalogLoader(self._write([])).load(), [])

    def test_missing_file_is_empty_catalog(self) -> None:
        loader = CatalogLoader(self.tmp_dir / "missing.json")
        with self.assertLogs("ring_catalog.storage", level="ERROR"):
            self.assertEqual(loader.load(), [])

    def test_invalid_json_is_empty_catalog(self) -> None:
        path = self._write("[{not json", raw=True)
        with self.assertLogs("ring_catalog.storage", level="ERROR"):
            self.assertEqual(CatalogLoader(path).load(), [])

    def test_non_array_is_empty_catalog(self) -> None:
        path = self._write({"products": []})
        with self.assertLogs("ring_catalog.storage", level="ERROR"):
            self.assertEqual(CatalogLoader(path).load(), [])

    def test_malformed_record_is_empty_catalog(self) -> None:
        path = self._write(
            [
                {"name": "A", "popularityScore": 0.5, "weight": 2},
                {"name": "B", "weight": 2},
            ]
        )
        with self.assertLogs("ring_catalog.storage", level="ERROR"):
            self.assertEqual(CatalogLoader(path).load(), [])

    def test_undecodable_bytes_are_empty_catalog(self) -> None:
        path = self.tmp_dir / "products.json"
        path.write_bytes(b"\xff\xfe")
        with self.assertLogs("ring_catalog.storage", level="ERROR"):
            self.assertEqual(CatalogLoader(path).load(), [])

    def test_non_utf8_name_is_empty_catalog(self) -> None:
        path = self.tmp_dir / "products.json"
        path.write_bytes(
            b'[{"name": "\xff\xfe", "popularityScore": 0.5, "weight": 2}]'
        )
        with self.assertLogs("ring_catalog.storage", level="ERROR"):
            self.assertEqual(CatalogLoader(path).load(), [])

    def test_non_finite_numbers_are_empty_catalog(self) -> None:
        for record in (
            '{"name": "A", "popularityScore": 0.5, "weight": Infinity}',
            '{"name": "A", "popularityScore": NaN, "weight": 2}',
            '{"name": "A", "popularityScore": 0.5, "weight": -Infinity}',
        ):
            with self.subTest(record=record):
                path = self._write(f"[{record}]", raw=True)
                with self.assertLogs("ring_catalog.storage", level="ERROR"):
                    self.assertEqual(CatalogLoader(path).load(), [])

    def test_rereads_file_on_each_load(self) -> None:
        path = self._write([])
        loader = CatalogLoader(path)
        self.assertEqual(loader.load(), [])
        self._write([{"name": "A", "popularityScore": 0.5, "weight": 2}])
        self.assertEqual(len(loader.load()), 1)

    def test_defaults_to_settings_path(self) -> None:
        self.assertEqual(CatalogLoader().path, Settings.CATALOG_PATH)

    def test_bundled_catalog_loads(self) -> None:
        """The shipped sample catalog is well-formed."""
        products = CatalogLoader(
            Settings.BASE_DIR / "data" / "products.json"
        ).load()
        self.assertGreater(len(products), 0)
        for p in products:
            with self.subTest(name=p.name):
                self.assertGreaterEqual(p.popularity_score, 0.0)
                self.assertLessEqual(p.popularity_score, 1.0)
                self.assertGreater(p.weight, 0.0)
                self.assertEqual(
                    set(p.images), set(Settings.IMAGE_VARIANTS)
                )


if __name__ == "__main__":
    unittest.main()
