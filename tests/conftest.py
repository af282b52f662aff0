"""Test configuration and fixtures for the gateway test suite."""

from __future__ import annotations

import json
from collections.abc import Iterator
from itertools import count
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from users_gateway.api import create_api
from users_gateway.settings import get_settings
from users_gateway.store import get_store_transport

BACKEND_URL = "https://store.example.test"
BACKEND_KEY = "test-anon-key"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("SUPABASE_URL", BACKEND_URL)
    monkeypatch.setenv("SUPABASE_ANON_KEY", BACKEND_KEY)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeTableStore:
    """In-memory PostgREST ``users`` table served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self._ids = count(1)

    def _reply(self, status: int, data: Any) -> httpx.Response:
        return httpx.Response(status, json=data)

    def _matching(self, request: httpx.Request) -> list[dict[str, Any]]:
        id_filter = request.url.params.get("id")
        if id_filter is None:
            return list(self.rows.values())
        if not id_filter.startswith("eq."):
            return []
        row = self.rows.get(id_filter.removeprefix("eq."))
        return [row] if row is not None else []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path != "/rest/v1/users":
            return self._reply(404, {"message": "relation does not exist"})

        if request.method == "POST":
            created = []
            for fields in json.loads(request.content):
                row = {"id": str(next(self._ids)), **fields}
                self.rows[row["id"]] = row
                created.append(row)
            return self._reply(201, created)

        matched = self._matching(request)
        if request.method == "GET":
            return self._reply(200, matched)
        if request.method == "PATCH":
            changes = json.loads(request.content)
            for row in matched:
                row.update(changes)
            return self._reply(200, matched)
        if request.method == "DELETE":
            for row in matched:
                del self.rows[row["id"]]
            return self._reply(200, matched)
        return self._reply(405, {"message": "method not allowed"})


@pytest.fixture
def store() -> FakeTableStore:
    return FakeTableStore()


@pytest.fixture
def client(store: FakeTableStore) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_store_transport] = lambda: httpx.MockTransport(store.handle)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
