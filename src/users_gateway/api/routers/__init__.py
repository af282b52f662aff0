"""Route definitions for public HTTP endpoints."""

from users_gateway.api.routers.docs import router as docs_router
from users_gateway.api.routers.fallback import FALLBACK_PATH, not_found
from users_gateway.api.routers.meta import router as meta_router
from users_gateway.api.routers.users import router as users_router

__all__ = ["FALLBACK_PATH", "docs_router", "meta_router", "not_found", "users_router"]
