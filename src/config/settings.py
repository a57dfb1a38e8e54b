# src/config/settings.py

"""Central configuration for the storefront."""

import math
import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront."""

    # --- Catalog API ---
    CATALOG_BASE_URL: str = os.getenv(
        "STOREFRONT_CATALOG_URL", "https://fakestoreapi.com"
    ).rstrip("/")

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Cart ---
    CART_STORAGE_KEY: str = "cart"
    CART_CHANGED_EVENT: str = "cartUpdated"
    CART_BADGE_LIMIT: int = 99          # Badge shows "99+" above this

    # --- Price filter ---
    PRICE_MIN: int = 0
    PRICE_MAX: int = 1000
    PRICE_STEP: int = 10
    # Unbounded until the user sets a ceiling
    DEFAULT_MAX_PRICE: float = math.inf

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = Path(
        os.getenv("STOREFRONT_DATA_DIR", str(BASE_DIR / "data"))
    )
    STORAGE_PATH: Path = DATA_DIR / "storage.json"
    LOGS_DIR: Path = BASE_DIR / "logs"
