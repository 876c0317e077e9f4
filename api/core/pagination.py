"""
Page/limit windowing helpers.

Query values that are not integers fall back to the defaults; integers
below 1 are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import Query

from .errors import BadRequestError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int


def query_int(raw: str | None, default: int) -> int:
    raw = (raw or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def page_params(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> PageParams:
    """
    FastAPI dependency parsing `?page=&limit=`. `limit` has no upper bound.
    """
    params = PageParams(
        page=query_int(page, DEFAULT_PAGE),
        limit=query_int(limit, DEFAULT_LIMIT),
    )
    if params.page < 1:
        raise BadRequestError("page must be a positive integer")
    if params.limit < 1:
        raise BadRequestError("limit must be a positive integer")
    return params


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit


def page_count(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return (total + limit - 1) // limit


def page_response(rows: list[Any], *, total: int, page: int, limit: int) -> dict[str, Any]:
    return {
        "data": list(rows),
        "total": total,
        "pages": page_count(total, limit),
        "page": page,
    }
