"""User endpoints with the repository layer mocked."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from conftest import user_row
from core.errors import StorageError
from users import repository


@pytest.fixture
def repo(monkeypatch: pytest.MonkeyPatch) -> dict[str, AsyncMock]:
    mocks = {
        "create_user": AsyncMock(return_value=user_row()),
        "count_users": AsyncMock(return_value=0),
        "list_users": AsyncMock(return_value=[]),
        "get_user": AsyncMock(return_value=user_row()),
        "update_user": AsyncMock(return_value=None),
        "delete_user": AsyncMock(return_value=None),
    }
    for name, mock in mocks.items():
        monkeypatch.setattr(repository, name, mock)
    return mocks


def test_create_user_returns_bare_record(client: TestClient, repo: dict, fake_pool: object) -> None:
    payload = {"name": "Ada", "email": "ada@example.com", "hrms_user_id": "HU1"}

    resp = client.post("/api/users", json=payload)

    assert resp.status_code == 201
    assert resp.json() == user_row()
    repo["create_user"].assert_awaited_once_with(
        fake_pool,
        name="Ada",
        email="ada@example.com",
        hrms_user_id="HU1",
        propeak_user_id="",
        skillzengine_user_id="",
    )


def test_create_user_malformed_json(client: TestClient, repo: dict) -> None:
    resp = client.post("/api/users", content=b"{", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid JSON"}
    repo["create_user"].assert_not_awaited()


def test_create_user_storage_error(client: TestClient, repo: dict) -> None:
    repo["create_user"].side_effect = StorageError("duplicate key value violates unique constraint")

    resp = client.post("/api/users", json={"name": "Ada"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "duplicate key value violates unique constraint"}


def test_list_users(client: TestClient, repo: dict, fake_pool: object) -> None:
    repo["count_users"].return_value = 5
    repo["list_users"].return_value = [user_row(id="9"), user_row(id="10")]

    resp = client.get("/api/users", params={"page": 2, "limit": 3})

    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 5
    assert body["pages"] == 2
    assert body["page"] == 2
    assert [u["id"] for u in body["data"]] == ["9", "10"]
    repo["list_users"].assert_awaited_once_with(fake_pool, limit=3, offset=3)


def test_get_user(client: TestClient, repo: dict) -> None:
    resp = client.get("/api/users/7")

    assert resp.status_code == 200
    assert resp.json() == user_row()


def test_get_user_not_found(client: TestClient, repo: dict) -> None:
    repo["get_user"].return_value = None

    resp = client.get("/api/users/404")

    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_update_user(client: TestClient, repo: dict) -> None:
    resp = client.put("/api/users/7", json={"name": "Ada L.", "email": "ada@example.org"})

    assert resp.status_code == 200
    assert resp.json() == {
        "id": "7",
        "name": "Ada L.",
        "email": "ada@example.org",
        "hrms_user_id": "",
        "propeak_user_id": "",
        "skillzengine_user_id": "",
    }


def test_update_user_missing_body(client: TestClient, repo: dict) -> None:
    resp = client.put("/api/users/7")

    assert resp.status_code == 400
    repo["update_user"].assert_not_awaited()


def test_delete_user_no_content(client: TestClient, repo: dict, fake_pool: object) -> None:
    resp = client.delete("/api/users/7")

    assert resp.status_code == 204
    assert resp.content == b""
    repo["delete_user"].assert_awaited_once_with(fake_pool, "7")


def test_delete_user_storage_error(client: TestClient, repo: dict) -> None:
    repo["delete_user"].side_effect = StorageError("connection refused")

    resp = client.delete("/api/users/7")

    assert resp.status_code == 500
    assert resp.json() == {"error": "connection refused"}
