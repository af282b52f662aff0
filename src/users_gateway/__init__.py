"""Users gateway package wiring and entrypoints."""

from users_gateway.settings import GatewaySettings, get_settings

__all__ = ["GatewaySettings", "get_settings"]
