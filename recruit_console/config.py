import logging
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv


DEFAULT_API_BASE_URL = "http://localhost:3000/api"
DEFAULT_PAGE_SIZE = 5


@dataclass
class Settings:
    # Recruiting API
    api_base_url: str = DEFAULT_API_BASE_URL

    # Candidate listing
    page_size: int = DEFAULT_PAGE_SIZE

    # None means requests never time out
    request_timeout: Optional[float] = None

    # Logging
    log_level: str = "INFO"


# Global settings instance
_settings: Optional[Settings] = None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_settings() -> Settings:
    global _settings
    load_dotenv()

    base_url = os.getenv("RECRUIT_API_BASE_URL", DEFAULT_API_BASE_URL).strip().strip('"')
    if not base_url:
        base_url = DEFAULT_API_BASE_URL

    page_size = _int_env("RECRUIT_PAGE_SIZE", DEFAULT_PAGE_SIZE)
    if page_size < 1:
        raise ValueError("RECRUIT_PAGE_SIZE must be at least 1")

    _settings = Settings(
        api_base_url=base_url.rstrip("/"),
        page_size=page_size,
        request_timeout=_float_env("RECRUIT_REQUEST_TIMEOUT"),
        log_level=os.getenv("RECRUIT_LOG_LEVEL", "INFO").upper(),
    )
    return _settings


def get_settings() -> Settings:
    """Get the loaded settings. Must call load_settings() first."""
    global _settings
    if _settings is None:
        raise RuntimeError("Settings not initialized. Call load_settings() first.")
    return _settings


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic root handler; a no-op when one is already configured."""
    if level is None:
        level = _settings.log_level if _settings else "INFO"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
