"""
Runtime settings, read from the environment (and a project-root .env).

COMPARABLE_API_URL       base URL of the comparable-search service
COMPARABLE_API_TIMEOUT   per-request timeout in seconds
COMPARABLE_API_MAX_ATTEMPTS  attempts per search; 1 disables retries
LOG_LEVEL                root log level
"""
import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://starboard-dsqy90evu-kunal-singhs-projects-f14fa826.vercel.app"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_ATTEMPTS = 1

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    log_level: str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number; using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive; using {default}")
        return default
    return value


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer; using {default}")
        return default
    if value < 1:
        logger.warning(f"{name} must be at least 1; using {default}")
        return default
    return value


def _level_env(name: str, default: str) -> str:
    level = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"{name}={level!r} is not a logging level; using {default}")
        return default
    return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    load_dotenv(os.path.join(project_root, ".env"), override=False)

    api_url = (os.getenv("COMPARABLE_API_URL") or DEFAULT_API_URL).strip().rstrip("/")
    return Settings(
        api_url=api_url,
        timeout_seconds=_float_env("COMPARABLE_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        max_attempts=_int_env("COMPARABLE_API_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
        log_level=_level_env("LOG_LEVEL", "INFO"),
    )
