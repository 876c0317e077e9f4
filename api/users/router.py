"""
User CRUD endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core import db, pagination

from . import schemas, service

router = APIRouter(prefix="/api/users")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: schemas.UserPayload,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.User:
    return await service.create_user(pool, payload)


@router.get("")
async def list_users(
    params: pagination.PageParams = Depends(pagination.page_params),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.UserPage:
    return await service.list_users(pool, page=params.page, limit=params.limit)


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.User:
    return await service.get_user(pool, user_id)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: schemas.UserPayload,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.User:
    return await service.update_user(pool, user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> Response:
    await service.delete_user(pool, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
