# src/config/settings.py

"""Central configuration for the product catalog."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()

_URL_PREFIXES = ("http://", "https://")


def project_path(location: str, base: Path) -> str:
    """Anchor a relative filesystem location at *base*; URLs pass through."""
    if location.startswith(_URL_PREFIXES) or Path(location).is_absolute():
        return location
    return str(base / location)


class Settings:
    """Central configuration for the product catalog."""

    # --- Data sources ---
    API_BASE: str = os.getenv("CATALOG_API_BASE", "").rstrip("/")
    REQUEST_TIMEOUT: float = 10.0       # Seconds per source attempt
    SLOW_THRESHOLD_MS: float = 5000.0   # Health check "slow" cutoff
    CACHE_BUST_PARAM: str = "_"

    # --- Catalog ---
    CATEGORY_ORDER: list[str] = [
        "Mietmöbel",
        "Dekoration und Verkleidung",
        "Zubehör",
        "Zelte und Pavillons",
        "Personal",
        "Gastrozubehör",
    ]
    ALL_CATEGORIES_LABEL: str = "Alle Produkte"
    UNCATEGORIZED_LABEL: str = "Sonstige"
    UNTITLED_LABEL: str = "Unbenanntes Produkt"

    # --- Rendering ---
    SITE_BASE_PATH: str = os.getenv("CATALOG_BASE_PATH", "/")
    PLACEHOLDER_IMAGE: str = (
        "data:image/svg+xml,%3Csvg xmlns=%22http://www.w3.org/2000/svg%22 "
        "width=%22300%22 height=%22200%22%3E%3Crect fill=%22%23f0f0f0%22 "
        "width=%22300%22 height=%22200%22/%3E%3Ctext x=%2250%25%22 "
        "y=%2250%25%22 text-anchor=%22middle%22 dy=%22.3em%22 "
        "fill=%22%23999%22 font-family=%22Arial%22 font-size=%2214%22%3E"
        "Bild nicht verf%C3%BCgbar%3C/text%3E%3C/svg%3E"
    )
    MESSAGING_BASE_URL: str = "https://wa.me"
    WHATSAPP_NUMBER: str = os.getenv(
        "CATALOG_WHATSAPP_NUMBER", "4900000000000"
    )
    CONTACT_MESSAGE_PREFIX: str = "Hallo! Ich interessiere mich für: "

    # --- User-facing messages ---
    LOADING_MESSAGE: str = "Produkte werden geladen …"
    ADVISORY_MESSAGE: str = (
        "Die Live-Daten konnten nicht geladen werden. "
        "Es werden lokale Ergebnisse angezeigt."
    )
    ERROR_MESSAGE: str = (
        "Produkte konnten nicht geladen werden. "
        "Bitte versuchen Sie es später erneut."
    )
    EMPTY_MESSAGE: str = "Keine Produkte gefunden."

    # --- Contact form ---
    CONTACT_FORM_ENDPOINT: str = os.getenv(
        "CATALOG_CONTACT_ENDPOINT", "https://formsubmit.co/api/submit"
    )

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "de-DE,de;q=0.9,en;q=0.8",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    SITE_DIR: Path = BASE_DIR / "site"
    PAGE_TEMPLATE: Path = SITE_DIR / "produkte.html"
    OUTPUT_DIR: Path = BASE_DIR / "public"
    LOGS_DIR: Path = BASE_DIR / "logs"
    # Relative paths are taken from the project root, not the working dir
    FALLBACK_LOCATION: str = project_path(
        os.getenv("CATALOG_FALLBACK", "site/products.json"), BASE_DIR
    )
