"""
Organization persistence (raw SQL over `global_org`).

Ids come back as text. A malformed id matches nothing and never reaches
the database.
"""

from __future__ import annotations

import asyncpg

from core import db
from core.errors import StorageError

_COLUMNS = "id::text AS id, name, hrms_org_id, propeak_org_id, skillzengine_org_id"


async def create_org(
    pool: asyncpg.Pool,
    *,
    name: str,
    hrms_org_id: str,
    propeak_org_id: str,
    skillzengine_org_id: str,
) -> dict:
    row = await db.fetch_one(
        pool,
        f"""
        INSERT INTO global_org (name, hrms_org_id, propeak_org_id, skillzengine_org_id)
        VALUES ($1, $2, $3, $4)
        RETURNING {_COLUMNS}
        """,
        name,
        hrms_org_id,
        propeak_org_id,
        skillzengine_org_id,
    )
    if row is None:
        raise StorageError("Failed to create org.")
    return row


async def count_orgs(pool: asyncpg.Pool) -> int:
    total = await db.fetch_value(pool, "SELECT COUNT(*) FROM global_org")
    return int(total or 0)


async def list_orgs(pool: asyncpg.Pool, *, limit: int, offset: int) -> list[dict]:
    return await db.fetch_all(
        pool,
        f"""
        SELECT {_COLUMNS}
        FROM global_org
        ORDER BY name
        LIMIT $1 OFFSET $2
        """,
        limit,
        offset,
    )
async def get_org(pool: asyncpg.Pool, org_id: str) -> dict | None:
    key = db.parse_id(org_id)
    if key is None:
        return None
    return await db.fetch_one(
        pool,
        f"""
        SELECT {_COLUMNS}
        FROM global_org
        WHERE id = $1
        """,
        key,
    )


async def update_org(
    pool: asyncpg.Pool,
    org_id: str,
    *,
    name: str,
    hrms_org_id: str,
    propeak_org_id: str,
    skillzengine_org_id: str,
) -> None:
    key = db.parse_id(org_id)
    if key is None:
        return None
    await db.execute(
        pool,
        """
        UPDATE global_org
        SET name = $1,
            hrms_org_id = $2,
            propeak_org_id = $3,
            skillzengine_org_id = $4
        WHERE id = $5
        """,
        name,
        hrms_org_id,
        propeak_org_id,
        skillzengine_org_id,
        key,
    )


async def delete_org(pool: asyncpg.Pool, org_id: str) -> None:
    key = db.parse_id(org_id)
    if key is None:
        return None
    await db.execute(pool, "DELETE FROM global_org WHERE id = $1", key)
