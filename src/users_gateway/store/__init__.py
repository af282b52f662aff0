"""Backend table store client and its FastAPI wiring."""

from users_gateway.store.client import (
    SELECT_ALL,
    StoreNotConfiguredError,
    StoreResponse,
    TableStoreClient,
    eq,
)
from users_gateway.store.dependencies import get_store_client, get_store_transport

__all__ = [
    "SELECT_ALL",
    "StoreNotConfiguredError",
    "StoreResponse",
    "TableStoreClient",
    "eq",
    "get_store_client",
    "get_store_transport",
]
