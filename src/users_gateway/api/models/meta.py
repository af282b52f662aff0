"""Pydantic models for service metadata endpoints."""

from pydantic import BaseModel


class RootResponse(BaseModel):
    """Greeting returned by the root endpoint."""

    message: str


class EnvStatusResponse(BaseModel):
    """Reports whether backend settings are present, never their values."""

    supabase_url_configured: bool
    supabase_key_configured: bool


class ErrorResponse(BaseModel):
    """Error body produced by ``HTTPException``."""

    detail: str
