"""
Category business logic.
"""

from __future__ import annotations

from uuid import UUID

from core.db import Database, parse_uuid
from core.errors import DatabaseError, NotFoundError

from . import repository, schemas

RESOURCE = "Category"


async def create_category(db: Database, payload: schemas.CreateCategoryRequest) -> dict:
    row = await repository.create_category(
        db,
        category_name=payload.category_name,
        created_by=payload.created_by,
    )
    if row is None:
        raise DatabaseError("INSERT into categories returned no row.")
    return row


async def list_categories(db: Database) -> list[dict]:
    return await repository.list_active_categories(db)


def _category_uuid(category_id: str) -> UUID:
    parsed = parse_uuid(category_id)
    if parsed is None:
        raise NotFoundError(RESOURCE, category_id)
    return parsed


async def get_category(db: Database, category_id: str) -> dict:
    row = await repository.get_active_category(db, _category_uuid(category_id))
    if row is None:
        raise NotFoundError(RESOURCE, category_id)
    return row


async def update_category(
    db: Database,
    category_id: str,
    payload: schemas.UpdateCategoryRequest,
) -> dict:
    row = await repository.update_category(
        db,
        _category_uuid(category_id),
        category_name=payload.category_name,
        is_active=payload.is_active,
        updated_by=payload.updated_by,
    )
    if row is None:
        raise NotFoundError(RESOURCE, category_id)
    return row


async def delete_category(db: Database, category_id: str) -> dict:
    row = await repository.soft_delete_category(db, _category_uuid(category_id))
    if row is None:
        raise NotFoundError(RESOURCE, category_id)
    return row
