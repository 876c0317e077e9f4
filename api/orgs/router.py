"""
Organization CRUD endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db, pagination

from . import schemas, service

router = APIRouter(prefix="/api/orgs")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_org(
    payload: schemas.OrgPayload,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.OrgResponse:
    return await service.create_org(pool, payload)


@router.get("")
async def list_orgs(
    params: pagination.PageParams = Depends(pagination.page_params),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.OrgPage:
    """
    Orgs ordered by name. `limit` has no upper bound.
    """
    return await service.list_orgs(pool, page=params.page, limit=params.limit)


@router.get("/{org_id}")
async def get_org(
    org_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.OrgResponse:
    return await service.get_org(pool, org_id)


@router.put("/{org_id}")
async def update_org(
    org_id: str,
    payload: schemas.OrgPayload,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.OrgResponse:
    return await service.update_org(pool, org_id, payload)


@router.delete("/{org_id}")
async def delete_org(
    org_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.OrgDeleteResponse:
    return await service.delete_org(pool, org_id)
