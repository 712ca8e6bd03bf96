"""
Environment-driven settings.

Everything is read lazily from `os.environ` so tests can monkeypatch the
environment without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_PAGE_SIZE = 12
DEFAULT_MAX_PAGE_SIZE = 100

DEFAULT_TRANSLATION_BASE_URL = "https://api.mymemory.translated.net"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


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


def env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def db_pool_min_size() -> int:
    return max(1, env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout_s() -> float:
    return env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def db_auto_migrate() -> bool:
    return env_bool("DB_AUTO_MIGRATE", True)


def page_size_default() -> int:
    size = env_int("PAGE_SIZE_DEFAULT", DEFAULT_PAGE_SIZE)
    return min(max(1, size), page_size_max())


def page_size_max() -> int:
    return max(1, env_int("PAGE_SIZE_MAX", DEFAULT_MAX_PAGE_SIZE))


def translation_base_url() -> str:
    return env_str("TRANSLATION_BASE_URL", DEFAULT_TRANSLATION_BASE_URL)


def translation_source_lang() -> str:
    return env_str("TRANSLATION_SOURCE_LANG", "en")


def translation_target_lang() -> str:
    return env_str("TRANSLATION_TARGET_LANG", "fr")


def translation_timeout_s() -> float:
    return env_float("TRANSLATION_TIMEOUT_S", 5.0)


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()
