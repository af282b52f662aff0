"""Service layer for API-specific logic."""

from users_gateway.api.services.users import UserNotFoundError, UserService

__all__ = ["UserNotFoundError", "UserService"]
