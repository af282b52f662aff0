"""API layer exposed by the users gateway."""

from users_gateway.api.app import create_api

__all__ = ["create_api"]
