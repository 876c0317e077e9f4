"""
User operations. No cross-checks against organizations.
"""

from __future__ import annotations

import logging

import asyncpg

from core import pagination
from core.errors import NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def create_user(pool: asyncpg.Pool, payload: schemas.UserPayload) -> schemas.User:
    row = await repository.create_user(pool, **payload.model_dump())
    logger.info("user_created id=%s", row["id"])
    return schemas.User(**row)


async def list_users(pool: asyncpg.Pool, *, page: int, limit: int) -> schemas.UserPage:
    total = await repository.count_users(pool)
    rows = await repository.list_users(
        pool,
        limit=limit,
        offset=pagination.offset_for(page, limit),
    )
    return schemas.UserPage(**pagination.page_response(rows, total=total, page=page, limit=limit))


async def get_user(pool: asyncpg.Pool, user_id: str) -> schemas.User:
    row = await repository.get_user(pool, user_id)
    if row is None:
        raise NotFoundError("User not found")
    return schemas.User(**row)


async def update_user(
    pool: asyncpg.Pool,
    user_id: str,
    payload: schemas.UserPayload,
) -> schemas.User:
    fields = payload.model_dump()
    await repository.update_user(pool, user_id, **fields)
    logger.info("user_updated id=%s", user_id)
    return schemas.User(id=user_id, **fields)


async def delete_user(pool: asyncpg.Pool, user_id: str) -> None:
    await repository.delete_user(pool, user_id)
    logger.info("user_deleted id=%s", user_id)
