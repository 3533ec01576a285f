# utils/config.py
"""
Application configuration
Values come from environment variables (a local .env file is loaded first)

Version: 1.0.0
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return float(value)


# ==================== Backend API ====================

API_CONFIG = {
    "base_url": os.getenv("BACKEND_URL", "http://localhost:4000").rstrip("/"),
    "token": os.getenv("ADMIN_TOKEN", ""),
    "timeout": _get_float("API_TIMEOUT", 30.0),
    "retries": _get_int("API_RETRIES", 3),
}

# ==================== Application ====================

APP_CONFIG = {
    "CURRENCY": os.getenv("CURRENCY", "₹"),
    "TIMEZONE": os.getenv("APP_TIMEZONE", "Asia/Kolkata"),
    "DATE_FORMAT": os.getenv("DATE_FORMAT", "%d/%m/%Y, %H:%M:%S"),
    "PRODUCT_LIST_LIMIT": _get_int("PRODUCT_LIST_LIMIT", 1000),
    "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
}

# ==================== Exports ====================

EXPORT_CONFIG = {
    "FONTS_DIR": Path(os.getenv("FONTS_DIR", str(PROJECT_ROOT / "fonts"))),
    "PDF_FONT_SIZE": _get_int("PDF_FONT_SIZE", 8),
    "EXPORT_TIMEOUT": _get_float("EXPORT_TIMEOUT", 60.0),
    "EXPORT_WORKERS": _get_int("EXPORT_WORKERS", 2),
}
