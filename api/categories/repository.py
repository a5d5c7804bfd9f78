"""
Category persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core.db import Database

CATEGORY_COLUMNS = """
    id::text AS id,
    categoryname AS "categoryName",
    isactive AS "isActive",
    createdby AS "createdBy",
    updatedby AS "updatedBy"
"""


async def create_category(
    db: Database,
    *,
    category_name: str,
    created_by: str | None = None,
) -> dict | None:
    return await db.fetch_one(
        f"""
        INSERT INTO categories (categoryname, createdby)
        VALUES ($1, $2)
        RETURNING {CATEGORY_COLUMNS}
        """,
        category_name,
        created_by,
    )


async def list_active_categories(db: Database) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {CATEGORY_COLUMNS}
        FROM categories
        WHERE isactive = true
        """
    )


async def get_active_category(db: Database, category_id: UUID) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {CATEGORY_COLUMNS}
        FROM categories
        WHERE id = $1
          AND isactive = true
        """,
        category_id,
    )


async def update_category(
    db: Database,
    category_id: UUID,
    *,
    category_name: str,
    is_active: bool,
    updated_by: str | None = None,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE categories
        SET categoryname = $1,
            isactive = $2,
            updatedby = $3
        WHERE id = $4
        RETURNING {CATEGORY_COLUMNS}
        """,
        category_name,
        is_active,
        updated_by,
        category_id,
    )


async def soft_delete_category(db: Database, category_id: UUID) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE categories
        SET isactive = false
        WHERE id = $1
        RETURNING {CATEGORY_COLUMNS}
        """,
        category_id,
    )
