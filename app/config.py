import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

APP_ENV: str = os.getenv("APP_ENV", "development")
CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

LEMONSQUEEZY_API_BASE: str = os.getenv("LEMONSQUEEZY_API_BASE", "https://api.lemonsqueezy.com/v1")
LEMONSQUEEZY_TIMEOUT_SECONDS: float = float(os.getenv("LEMONSQUEEZY_TIMEOUT_SECONDS", "30"))


def is_production() -> bool:
    return APP_ENV == "production"


def get_cors_origins() -> list[str]:
    if not CORS_ORIGINS:
        return []
    return [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]


def get_lemonsqueezy_api_key() -> Optional[str]:
    """Resolved per request so a missing key is reported, not fatal at startup."""
    return os.getenv("LEMONSQUEEZY_API_KEY") or None
