"""Models used for API request and response payloads."""

from users_gateway.api.models.meta import (
    EnvStatusResponse,
    ErrorResponse,
    RootResponse,
)
from users_gateway.api.models.users import UserPayload, UserResponse

__all__ = [
    "EnvStatusResponse",
    "ErrorResponse",
    "RootResponse",
    "UserPayload",
    "UserResponse",
]
