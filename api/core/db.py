"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI opens it in the lifespan handler,
keeps it on `app.state.db` and closes it on shutdown (see `api/main.py`).
Route handlers receive it through the `get_database` dependency.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Tables are referenced unqualified; the pool sets `search_path` to the
configured schema.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit
from uuid import UUID

import asyncpg
from fastapi import Request

from . import config
from .errors import DatabaseError

logger = logging.getLogger(__name__)

# Failures that mean "the query did not run"; everything else is a bug.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def connect_kwargs() -> dict[str, Any]:
    """
    Build asyncpg connection arguments from the environment.

    DATABASE_URL wins when set; otherwise the PG* variables are used.
    """
    url = config.database_url()
    if url:
        return {"dsn": _sanitize_database_url(url)}
    return {
        "host": config.pg_host(),
        "port": config.pg_port(),
        "database": config.pg_database(),
        "user": config.pg_user(),
        "password": config.pg_password(),
    }


def parse_uuid(raw: str) -> UUID | None:
    """
    Parse a path id; anything that is not a UUID can never match a row.
    """
    try:
        return UUID(raw)
    except ValueError:
        return None


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    Thin wrapper around an asyncpg pool.

    Every query helper translates driver failures into `DatabaseError` so the
    HTTP layer never sees asyncpg exceptions.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(cls, **overrides: Any) -> Database:
        kwargs = connect_kwargs()
        kwargs.update(overrides)
        schema = config.pg_schema()
        pool = await asyncpg.create_pool(
            min_size=config.pool_min_size(),
            max_size=config.pool_max_size(),
            server_settings={"search_path": schema},
            **kwargs,
        )
        logger.info(
            "pool_opened host=%s database=%s schema=%s",
            kwargs.get("host") or "<dsn>",
            kwargs.get("database") or "<dsn>",
            schema,
        )
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()
        logger.info("pool_closed")

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self._pool.fetchrow(sql, *args)
        except _DRIVER_ERRORS as exc:
            logger.exception("query_failed op=fetch_one")
            raise DatabaseError(str(exc)) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self._pool.fetch(sql, *args)
        except _DRIVER_ERRORS as exc:
            logger.exception("query_failed op=fetch_all")
            raise DatabaseError(str(exc)) from exc
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the status tag.
        """
        try:
            return await self._pool.execute(sql, *args)
        except _DRIVER_ERRORS as exc:
            logger.exception("query_failed op=execute")
            raise DatabaseError(str(exc)) from exc


def get_database(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not initialized. It is opened in the app lifespan.")
    return db
