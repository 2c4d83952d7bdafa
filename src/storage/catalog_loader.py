# src/storage/catalog_loader.py

"""Reads the static product catalog from disk."""

import json
import logging
from pathlib import Path

from src.config.settings import Settings
from src.models.product import RawProduct

logger = logging.getLogger("ring_catalog.storage")


class CatalogLoader:
    """Load raw product records from a JSON file.

    The file is re-read on every :meth:`load` call so catalog edits show
    up without a restart.  Any read or parse problem yields an empty
    catalog rather than an exception.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path if path is not None else Settings.CATALOG_PATH
        logger.debug("CatalogLoader initialised — path=%s", self.path)

    def load(self) -> list[RawProduct]:
        """Return the catalog records, or ``[]`` if the source is unusable."""
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error("Catalog file not found: %s", self.path)
            return []
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.error(
                "Error loading catalog %s: %s", self.path, exc, exc_info=True
            )
            return []

        if not isinstance(data, list):
            logger.error(
                "Catalog %s must contain a JSON array, got %s",
                self.path,
                type(data).__name__,
            )
            return []

        try:
            products = [RawProduct.from_dict(record) for record in data]
        except ValueError as exc:
            logger.error("Malformed catalog record in %s: %s", self.path, exc)
            return []

        logger.debug("Loaded %d catalog records from %s", len(products), self.path)
        return products
