"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from users_gateway.api.models import UserPayload
from users_gateway.api.services import UserService
from users_gateway.settings import GatewaySettings, get_settings
from users_gateway.store import TableStoreClient, get_store_client


def get_user_service(
    client: Annotated[TableStoreClient, Depends(get_store_client)],
    settings: Annotated[GatewaySettings, Depends(get_settings)],
) -> UserService:
    """Return a :class:`UserService` bound to the request's store client."""

    return UserService(client, table=settings.supabase_table)


async def read_user_payload(request: Request) -> UserPayload:
    """Parse the raw request body into a :class:`UserPayload`.

    Anything that is not a JSON object of string fields is answered with 500
    and the parser's message.
    """

    body = await request.body()
    try:
        return UserPayload.model_validate_json(body)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc


__all__ = ["get_user_service", "read_user_payload"]
