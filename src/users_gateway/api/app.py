"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_gateway.api.routers import (
    FALLBACK_PATH,
    docs_router,
    meta_router,
    not_found,
    users_router,
)
from users_gateway.logging_config import setup_logging
from users_gateway.settings import get_settings


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    setup_logging()
    config = get_settings()
    app = FastAPI(title="Users API", docs_url=None, redoc_url=None, openapi_url=None)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(meta_router)
    app.include_router(users_router)
    app.include_router(docs_router)
    # Must stay last so that every other route is matched first.
    app.add_route(FALLBACK_PATH, not_found, include_in_schema=False)
    return app
