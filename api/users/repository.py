"""
User persistence (raw SQL over `global_user`).
"""

from __future__ import annotations

import asyncpg

from core import db
from core.errors import StorageError

_COLUMNS = "id::text AS id, name, email, hrms_user_id, propeak_user_id, skillzengine_user_id"


async def create_user(
    pool: asyncpg.Pool,
    *,
    name: str,
    email: str,
    hrms_user_id: str,
    propeak_user_id: str,
    skillzengine_user_id: str,
) -> dict:
    row = await db.fetch_one(
        pool,
        f"""
        INSERT INTO global_user (name, email, hrms_user_id, propeak_user_id, skillzengine_user_id)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_COLUMNS}
        """,
        name,
        email,
        hrms_user_id,
        propeak_user_id,
        skillzengine_user_id,
    )
    if row is None:
        raise StorageError("Failed to create user.")
    return row


async def count_users(pool: asyncpg.Pool) -> int:
    total = await db.fetch_value(pool, "SELECT COUNT(*) FROM global_user")
    return int(total or 0)


async def list_users(pool: asyncpg.Pool, *, limit: int, offset: int) -> list[dict]:
    return await db.fetch_all(
        pool,
        f"""
        SELECT {_COLUMNS}
        FROM global_user
        ORDER BY name
        LIMIT $1 OFFSET $2
        """,
        limit,
        offset,
    )


async def get_user(pool: asyncpg.Pool, user_id: str) -> dict | None:
    key = db.parse_id(user_id)
    if key is None:
        return None
    return await db.fetch_one(
        pool,
        f"""
        SELECT {_COLUMNS}
        FROM global_user
        WHERE id = $1
        """,
        key,
    )


async def update_user(
    pool: asyncpg.Pool,
    user_id: str,
    *,
    name: str,
    email: str,
    hrms_user_id: str,
    propeak_user_id: str,
    skillzengine_user_id: str,
) -> None:
    key = db.parse_id(user_id)
    if key is None:
        return None
    await db.execute(
        pool,
        """
        UPDATE global_user
        SET name = $1,
            email = $2,
            hrms_user_id = $3,
            propeak_user_id = $4,
            skillzengine_user_id = $5
        WHERE id = $6
        """,
        name,
        email,
        hrms_user_id,
        propeak_user_id,
        skillzengine_user_id,
        key,
    )


async def delete_user(pool: asyncpg.Pool, user_id: str) -> None:
    key = db.parse_id(user_id)
    if key is None:
        return None
    await db.execute(pool, "DELETE FROM global_user WHERE id = $1", key)
