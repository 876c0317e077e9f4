"""
Async database access helpers (raw SQL) using asyncpg.

This module creates the connection pool but does not hold it. FastAPI
initializes it on startup, keeps it on `app.state.pool`, and closes it on
shutdown (see `api/main.py`). Handlers receive it through `get_pool`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Primary keys are uuid columns; `parse_id` turns a path segment into a UUID
so lookups compare against the native key type and use the index.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from uuid import UUID

import asyncpg
from fastapi import Request

from . import settings
from .errors import DatabaseStartupError, StorageError

logger = logging.getLogger(__name__)

# Everything the driver or the socket can throw during a round trip.
_STORAGE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncio.TimeoutError,
    OSError,
)


def database_url() -> str:
    # Passed to asyncpg unchanged; it understands sslmode and friends.
    return settings.database_url()


def parse_id(raw: str) -> UUID | None:
    """
    Return the UUID for `raw`, or None when it cannot be a key.
    """
    try:
        return UUID((raw or "").strip())
    except ValueError:
        return None


def _terminate(pool: asyncpg.Pool) -> None:
    try:
        pool.terminate()
    except asyncpg.InterfaceError as exc:
        logger.warning("db_pool_terminate_failed error=%s", exc)


async def init_pool(dsn: str | None = None, *, timeout_s: float | None = None) -> asyncpg.Pool:
    """
    Create the pool and verify the database answers.

    Both steps share one startup timeout. Any failure terminates whatever
    connections were opened and raises DatabaseStartupError; there is no
    degraded mode.
    """
    dsn = dsn or database_url()
    timeout_s = settings.db_connect_timeout_s() if timeout_s is None else timeout_s

    try:
        pool = asyncpg.create_pool(
            dsn=dsn,
            min_size=settings.db_pool_min_size(),
            max_size=settings.db_pool_max_size(),
            command_timeout=settings.db_command_timeout_s(),
            timeout=timeout_s,
        )
    except ValueError as exc:
        logger.error("db_pool_create_failed error=%s", exc)
        raise DatabaseStartupError(f"unable to create connection pool: {exc}") from exc

    try:
        # The pool is awaitable; awaiting it opens the initial connections.
        await asyncio.wait_for(pool, timeout=timeout_s)
    except (*_STORAGE_ERRORS, ValueError) as exc:
        _terminate(pool)
        logger.error("db_pool_create_failed error=%s", exc)
        raise DatabaseStartupError(f"unable to create connection pool: {exc}") from exc

    try:
        await pool.fetchval("SELECT 1", timeout=timeout_s)
    except _STORAGE_ERRORS as exc:
        _terminate(pool)
        logger.error("db_ping_failed error=%s", exc)
        raise DatabaseStartupError(f"unable to connect to database: {exc}") from exc

    logger.info(
        "db_pool_ready min_size=%s max_size=%s",
        settings.db_pool_min_size(),
        settings.db_pool_max_size(),
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def get_pool(request: Request) -> asyncpg.Pool:
    """
    FastAPI dependency: the pool created during lifespan startup.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _storage_error(exc: BaseException) -> StorageError:
    message = str(exc) or exc.__class__.__name__
    logger.warning("db_query_failed error=%s", message)
    return StorageError(message)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool.fetchrow(sql, *args)
    except _STORAGE_ERRORS as exc:
        raise _storage_error(exc) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool.fetch(sql, *args)
    except _STORAGE_ERRORS as exc:
        raise _storage_error(exc) from exc
    return [_record_to_dict(r) for r in rows]


async def fetch_value(pool: asyncpg.Pool, sql: str, *args: Any) -> Any:
    """
    Run a query and return the first column of the first row.
    """
    try:
        return await pool.fetchval(sql, *args)
    except _STORAGE_ERRORS as exc:
        raise _storage_error(exc) from exc


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE). No result returned.
    """
    try:
        await pool.execute(sql, *args)
    except _STORAGE_ERRORS as exc:
        raise _storage_error(exc) from exc
