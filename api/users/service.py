"""
User business logic.

Turns malformed ids and "no row" results into `NotFoundError`; database failures surface as
`DatabaseError` from the data-access layer untouched.
"""

from __future__ import annotations

from uuid import UUID

from core.db import Database, parse_uuid
from core.errors import DatabaseError, NotFoundError

from . import repository, schemas, security

RESOURCE = "User"


async def create_user(db: Database, payload: schemas.CreateUserRequest) -> dict:
    row = await repository.create_user(
        db,
        username=payload.username,
        password_hash=security.hash_password(payload.password),
        email=payload.email,
        created_by=payload.created_by,
    )
    if row is None:
        raise DatabaseError("INSERT into users returned no row.")
    return row


async def list_users(db: Database) -> list[dict]:
    return await repository.list_active_users(db)


def _user_uuid(user_id: str) -> UUID:
    parsed = parse_uuid(user_id)
    if parsed is None:
        raise NotFoundError(RESOURCE, user_id)
    return parsed


async def get_user(db: Database, user_id: str) -> dict:
    row = await repository.get_active_user(db, _user_uuid(user_id))
    if row is None:
        raise NotFoundError(RESOURCE, user_id)
    return row


async def update_user(db: Database, user_id: str, payload: schemas.UpdateUserRequest) -> dict:
    row = await repository.update_user(
        db,
        _user_uuid(user_id),
        username=payload.username,
        password_hash=security.hash_password(payload.password),
        email=payload.email,
        is_active=payload.is_active,
        updated_by=payload.updated_by,
    )
    if row is None:
        raise NotFoundError(RESOURCE, user_id)
    return row


async def delete_user(db: Database, user_id: str) -> dict:
    row = await repository.soft_delete_user(db, _user_uuid(user_id))
    if row is None:
        raise NotFoundError(RESOURCE, user_id)
    return row
