"""
Environment-driven settings.

Values are read on each call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os

DEFAULT_SCHEMA = "recipe"


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def database_url() -> str:
    return _env_str("DATABASE_URL")


def pg_host() -> str:
    return _env_str("PGHOST", "localhost")


def pg_port() -> int:
    return _env_int("PGPORT", 5432)


def pg_database() -> str | None:
    return _env_str("PGDATABASE") or None


def pg_user() -> str | None:
    return _env_str("PGUSER") or None


def pg_password() -> str | None:
    # Passwords may legitimately contain surrounding spaces.
    return os.environ.get("PGPASSWORD") or None


def pg_schema() -> str:
    return _env_str("PGSCHEMA", DEFAULT_SCHEMA)


def pool_min_size() -> int:
    return max(0, _env_int("PGPOOL_MIN", 1))


def pool_max_size() -> int:
    return max(1, pool_min_size(), _env_int("PGPOOL_MAX", 10))


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def api_docs_enabled() -> bool:
    return _env_bool("API_DOCS_ENABLED", True)


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
