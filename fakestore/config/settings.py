# fakestore/config/settings.py

"""Central configuration for the fakestore client."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the fakestore client."""

    # --- API ---
    API_BASE_URL: str = os.getenv(
        "FAKESTORE_API_URL", "https://fakestoreapi.com"
    ).rstrip("/")
    REQUEST_TIMEOUT: float = float(
        os.getenv("FAKESTORE_TIMEOUT", "30")
    )                                   # curl_cffi's own default

    # --- Transport ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Content-Type": "application/json",
    }

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FAKESTORE_LOG_LEVEL", "WARNING")  # console only

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
