# src/config/settings.py

"""Central configuration for the ring_catalog service."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the ring_catalog service."""

    APP_NAME: str = "Luxury Engagement Rings API Server"
    APP_VERSION: str = "1.0.0"

    # --- Server ---
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:5173")
    CORS_ORIGINS: list[str] = ["*"]

    # --- Gold price ---
    FALLBACK_GOLD_PRICE: float = 65.50      # USD per gram
    GOLD_PRICE_VOLATILITY: float = 5.0      # Full width of the simulated swing
    GOLD_PRICE_REFRESH_INTERVAL: float = float(
        os.getenv("GOLD_PRICE_REFRESH_INTERVAL", "1800")
    )                                       # Seconds between refreshes
    CURRENCY: str = "USD"
    PRICE_UNIT: str = "per gram"

    # --- Catalog ---
    IMAGE_VARIANTS: tuple[str, ...] = ("yellow", "rose", "white")

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = Path(
        os.getenv("CATALOG_PATH", str(BASE_DIR / "data" / "products.json"))
    )
    LOGS_DIR: Path = BASE_DIR / "logs"
