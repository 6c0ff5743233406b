"""
Tests for environment-driven settings.
"""

import pytest

from buildadvisor.config import Settings
from buildadvisor.dependencies import get_api_key


class TestSettings:
    """Settings read the environment on access."""

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "abc123")
        assert Settings().GEMINI_API_KEY == "abc123"

    def test_api_key_defaults_to_empty(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        assert Settings().GEMINI_API_KEY == ""

    def test_model_default(self, monkeypatch):
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        assert Settings().GEMINI_MODEL == "gemini-2.5-flash"

    def test_model_override(self, monkeypatch):
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
        assert Settings().GEMINI_MODEL == "gemini-2.5-pro"

    def test_environment_checks(self):
        settings = Settings()
        settings.ENVIRONMENT = "Production"
        assert settings.is_production() is True
        assert settings.is_development() is False


class TestApiKeyDependency:
    """get_api_key normalizes a missing key to None."""

    @pytest.mark.asyncio
    async def test_returns_key(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "abc123")
        assert await get_api_key() == "abc123"

    @pytest.mark.asyncio
    async def test_missing_key_is_none(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        assert await get_api_key() is None
