from __future__ import annotations

import pytest

from users_gateway.settings import GatewaySettings, get_settings


def test_settings_read_backend_from_environment() -> None:
    config = get_settings()

    assert config.supabase_url == "https://store.example.test"
    assert config.supabase_anon_key == "test-anon-key"
    assert config.supabase_table == "users"
    assert config.store_configured


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_store_not_configured_without_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SUPABASE_URL")

    assert not GatewaySettings().store_configured


def test_cors_origins_parsed_from_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://app.example.com"]')

    assert GatewaySettings().cors_allow_origins == ["https://app.example.com"]
