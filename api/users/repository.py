"""
User persistence (raw SQL).

Every function issues exactly one statement. Writes return the affected row
(or None when no row matched) via RETURNING.
"""

from __future__ import annotations

from uuid import UUID

from core.db import Database

# The password hash never leaves the database.
USER_COLUMNS = """
    id::text AS id,
    username,
    email,
    isactive AS "isActive",
    createdby AS "createdBy",
    updatedby AS "updatedBy"
"""


async def create_user(
    db: Database,
    *,
    username: str,
    password_hash: str,
    email: str,
    created_by: str | None = None,
) -> dict | None:
    return await db.fetch_one(
        f"""
        INSERT INTO users (username, passwordhash, email, createdby)
        VALUES ($1, $2, $3, $4)
        RETURNING {USER_COLUMNS}
        """,
        username,
        password_hash,
        email,
        created_by,
    )


async def list_active_users(db: Database) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE isactive = true
        """
    )


async def get_active_user(db: Database, user_id: UUID) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE id = $1
          AND isactive = true
        """,
        user_id,
    )


async def update_user(
    db: Database,
    user_id: UUID,
    *,
    username: str,
    password_hash: str,
    email: str,
    is_active: bool,
    updated_by: str | None = None,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE users
        SET username = $1,
            passwordhash = $2,
            email = $3,
            isactive = $4,
            updatedby = $5
        WHERE id = $6
        RETURNING {USER_COLUMNS}
        """,
        username,
        password_hash,
        email,
        is_active,
        updated_by,
        user_id,
    )


async def soft_delete_user(db: Database, user_id: UUID) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE users
        SET isactive = false
        WHERE id = $1
        RETURNING {USER_COLUMNS}
        """,
        user_id,
    )

