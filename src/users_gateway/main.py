"""Entrypoints that serve the users gateway with uvicorn.

``users-gateway`` and ``users-gateway-dev`` console scripts point here; both
take host, port and log level from :class:`GatewaySettings`.
"""

from __future__ import annotations

import uvicorn

from users_gateway.api import create_api
from users_gateway.settings import get_settings

app = create_api()


def _serve(*, reload: bool) -> None:
    config = get_settings()
    uvicorn.run(
        "users_gateway.main:app",
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
        reload=reload,
    )


def run_dev() -> None:
    """Serve with auto-reload for local development."""
    _serve(reload=True)


def run_prod() -> None:
    """Serve without reload."""
    _serve(reload=False)
