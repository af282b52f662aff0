"""FastAPI dependencies for backend store access."""

from collections.abc import AsyncIterator
from typing import Annotated

import httpx
from fastapi import Depends, HTTPException, status

from users_gateway.settings import GatewaySettings, get_settings
from users_gateway.store.client import StoreNotConfiguredError, TableStoreClient

SettingsDep = Annotated[GatewaySettings, Depends(get_settings)]


def get_store_transport() -> httpx.AsyncBaseTransport | None:
    """Return the transport for outbound calls; ``None`` uses httpx's default."""
    return None


async def get_store_client(
    settings: SettingsDep,
    transport: Annotated[httpx.AsyncBaseTransport | None, Depends(get_store_transport)],
) -> AsyncIterator[TableStoreClient]:
    """Yield a request-scoped :class:`TableStoreClient` built from current settings."""
    try:
        client = TableStoreClient.from_settings(settings, transport=transport)
    except StoreNotConfiguredError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc

    async with client:
        yield client
