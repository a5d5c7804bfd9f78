"""
Shared fixtures: an in-memory stand-in for `core.db.Database` and an HTTP
client bound to the FastAPI app without running its lifespan (no real pool).
"""

from __future__ import annotations

from typing import Any

import bcrypt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.db import get_database
from main import app
from users import security


class FakeDatabase:
    """
    Records every statement and replays queued results in order.

    A queued exception is raised instead of returned.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._results: list[Any] = []

    def queue(self, *results: Any) -> None:
        self._results.extend(results)

    def _next(self, sql: str, args: tuple[Any, ...]) -> Any:
        self.calls.append((sql, args))
        if not self._results:
            raise AssertionError(f"unexpected query: {sql}")
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_one(self, sql: str, *args: Any) -> dict | None:
        return self._next(sql, args)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict]:
        return self._next(sql, args)

    async def execute(self, sql: str, *args: Any) -> str:
        return self._next(sql, args)

    @property
    def last_sql(self) -> str:
        return " ".join(self.calls[-1][0].split())

    @property
    def last_args(self) -> tuple[Any, ...]:
        return self.calls[-1][1]


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest_asyncio.fixture
async def client(fake_db: FakeDatabase):
    app.dependency_overrides[get_database] = lambda: fake_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


def assert_envelope(body: dict) -> None:
    """Exactly one of data/error, matching the success flag."""
    assert isinstance(body["success"], bool)
    if body["success"]:
        assert "data" in body
        assert "error" not in body
    else:
        assert "error" in body
        assert "data" not in body


def password_matches(plain_password: str, password_hash: str) -> bool:
    """Check a stored `passwordhash` the way a login would."""
    hashed = (password_hash or "").encode("utf-8")
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(security.password_digest(plain_password), hashed)
    except ValueError:
        return False
