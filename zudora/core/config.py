from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    catalog_path: str | None
    extraction_strategy: str
    reply_delay_ms: int
    history_backend: str
    history_db_path: str
    history_title_max_chars: int
    session_max: int
    session_ttl_s: int


settings = Settings(
    api_key=_get_env("API_KEY"),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://localhost:3000",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    catalog_path=_get_env("CATALOG_PATH"),
    extraction_strategy=(_get_env("EXTRACTION_STRATEGY", "first_match") or "first_match").strip().lower(),
    reply_delay_ms=max(0, _get_env_int("REPLY_DELAY_MS", 1000)),
    history_backend=(_get_env("HISTORY_BACKEND", "sqlite") or "sqlite").strip().lower(),
    history_db_path=_get_env("HISTORY_DB_PATH", "data/history.db") or "data/history.db",
    history_title_max_chars=_get_env_int("HISTORY_TITLE_MAX_CHARS", 30),
    session_max=max(1, _get_env_int("SESSION_MAX", 1000)),
    session_ttl_s=_get_env_int("SESSION_TTL_S", 3600),
)

if settings.history_backend not in {"memory", "sqlite"}:
    raise RuntimeError("HISTORY_BACKEND must be either 'memory' or 'sqlite'.")

if settings.extraction_strategy not in {"first_match", "labeled", "labeled_then_first"}:
    raise RuntimeError(
        "EXTRACTION_STRATEGY must be one of 'first_match', 'labeled', 'labeled_then_first'."
    )
