"""
Organization operations.

Update and delete do not check that the row exists first; both succeed
when no row matches.
"""

from __future__ import annotations

import logging

import asyncpg

from core import pagination
from core.errors import NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def create_org(pool: asyncpg.Pool, payload: schemas.OrgPayload) -> schemas.OrgResponse:
    row = await repository.create_org(pool, **payload.model_dump())
    logger.info("org_created id=%s", row["id"])
    return schemas.OrgResponse(org=schemas.Org(**row), message="Org added successfully!")


async def list_orgs(pool: asyncpg.Pool, *, page: int, limit: int) -> schemas.OrgPage:
    # Count and page fetch are separate round trips, not one snapshot.
    total = await repository.count_orgs(pool)
    rows = await repository.list_orgs(
        pool,
        limit=limit,
        offset=pagination.offset_for(page, limit),
    )
    return schemas.OrgPage(**pagination.page_response(rows, total=total, page=page, limit=limit))


async def get_org(pool: asyncpg.Pool, org_id: str) -> schemas.OrgResponse:
    row = await repository.get_org(pool, org_id)
    if row is None:
        raise NotFoundError("Org not found")
    return schemas.OrgResponse(org=schemas.Org(**row), message="Org fetched successfully!")


async def update_org(
    pool: asyncpg.Pool,
    org_id: str,
    payload: schemas.OrgPayload,
) -> schemas.OrgResponse:
    fields = payload.model_dump()
    await repository.update_org(pool, org_id, **fields)
    logger.info("org_updated id=%s", org_id)
    return schemas.OrgResponse(
        org=schemas.Org(id=org_id, **fields),
        message="Org updated successfully!",
    )


async def delete_org(pool: asyncpg.Pool, org_id: str) -> schemas.OrgDeleteResponse:
    await repository.delete_org(pool, org_id)
    logger.info("org_deleted id=%s", org_id)
    return schemas.OrgDeleteResponse(message="Org deleted successfully!")
