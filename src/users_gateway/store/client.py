"""Thin client for a PostgREST-style table store (Supabase REST API).

Every call is a single request: no retries, no timeout, no backoff. Whatever
status and JSON body the backend returns is handed back unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from users_gateway.settings import GatewaySettings

logger = logging.getLogger(__name__)

REST_PREFIX = "rest/v1"
SELECT_ALL: dict[str, str] = {"select": "*"}


def eq(value: str) -> str:
    """Return a PostgREST equality filter for ``value``."""
    return f"eq.{value}"


class StoreNotConfiguredError(Exception):
    """Raised when the backend URL or access key is missing."""


@dataclass(slots=True)
class StoreResponse:
    """Status code and parsed JSON body of a backend reply."""

    status: int
    data: Any


class TableStoreClient:
    """Issues authenticated JSON requests against ``<base>/rest/v1``."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/{REST_PREFIX}/",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "Prefer": "return=representation",
            },
            transport=transport,
            timeout=None,
        )

    @classmethod
    def from_settings(
        cls,
        settings: GatewaySettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> TableStoreClient:
        """Build a client from application settings."""
        if not settings.store_configured:
            msg = "Backend store is not configured"
            raise StoreNotConfiguredError(msg)
        return cls(settings.supabase_url, settings.supabase_anon_key, transport=transport)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> StoreResponse:
        """Send one request and return the backend's status and JSON body.

        An empty response body is returned as ``None``. Transport errors and
        bodies that are not valid JSON propagate to the caller.
        """
        resp = await self._http.request(
            method,
            path.lstrip("/"),
            params=params,
            json=body,
        )
        logger.debug("%s %s -> %s", method, path, resp.status_code)
        data = resp.json() if resp.content else None
        return StoreResponse(status=resp.status_code, data=data)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> TableStoreClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
