"""Tests for the typed AppConfig dataclass."""

import dataclasses

import pytest

from token_invalidator.config import AppConfig
from token_invalidator.domain.errors import ConfigError


class TestAppConfig:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TOKEN_INVALIDATOR_TOKEN", " bot-token ")
        monkeypatch.setenv("GIST_API_TOKEN", "token ghp_abc")
        c = AppConfig.from_env()
        assert c.discord_token == "bot-token"
        assert c.gist_api_token == "token ghp_abc"
        assert c.has_gist_token is True

    def test_missing_discord_token(self, monkeypatch):
        monkeypatch.delenv("TOKEN_INVALIDATOR_TOKEN", raising=False)
        with pytest.raises(ConfigError):
            AppConfig.from_env()

    def test_blank_discord_token(self, monkeypatch):
        monkeypatch.setenv("TOKEN_INVALIDATOR_TOKEN", "   ")
        with pytest.raises(ConfigError):
            AppConfig.from_env()

    def test_missing_gist_token_allowed(self, monkeypatch):
        monkeypatch.setenv("TOKEN_INVALIDATOR_TOKEN", "bot-token")
        monkeypatch.delenv("GIST_API_TOKEN", raising=False)
        c = AppConfig.from_env()
        assert c.gist_api_token == ""
        assert c.has_gist_token is False

    def test_frozen(self):
        c = AppConfig(discord_token="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.discord_token = "y"
