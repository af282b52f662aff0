"""Service metadata endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from users_gateway.api.models import EnvStatusResponse, RootResponse
from users_gateway.settings import GatewaySettings, get_settings

router = APIRouter(tags=["meta"])


@router.get("/", response_model=RootResponse)
def read_root() -> RootResponse:
    return RootResponse(message="Users API is running")


@router.get("/env", response_model=EnvStatusResponse)
def read_env_status(
    settings: Annotated[GatewaySettings, Depends(get_settings)],
) -> EnvStatusResponse:
    """Report which backend settings are present without echoing them."""

    return EnvStatusResponse(
        supabase_url_configured=bool(settings.supabase_url),
        supabase_key_configured=bool(settings.supabase_anon_key),
    )
