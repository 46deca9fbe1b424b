"""
Environment-driven settings.

Values are read on every call so tests can patch the environment freely.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)


def env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def db_pool_min_size() -> int:
    return max(env_int("DB_POOL_MIN_SIZE", 1), 0)


def db_pool_max_size() -> int:
    return max(env_int("DB_POOL_MAX_SIZE", 5), 1)


def db_command_timeout_s() -> int:
    return env_int("DB_COMMAND_TIMEOUT_S", 30)


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "")
    origins = [part.strip() for part in raw.split(",") if part.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def advocates_api_base_url() -> str:
    return env_str("ADVOCATES_API_BASE_URL", "http://localhost:8000").rstrip("/")


def advocates_page_size() -> int:
    # Page size is at least 1.
    return max(env_int("ADVOCATES_PAGE_SIZE", 10), 1)
