"""Tests for translation_store.configuration settings."""

import pytest

from translation_store.configuration import LoaderSettings, Settings


@pytest.mark.unit
class TestLoaderSettings:
    """Tests for LoaderSettings."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when no environment variables are set."""
        monkeypatch.delenv("TRANSLATIONS_HTTP_TIMEOUT_SECONDS", raising=False)
        monkeypatch.delenv("TRANSLATIONS_FOLLOW_REDIRECTS", raising=False)
        loader = LoaderSettings()
        assert loader.http_timeout_seconds == 10.0
        assert loader.follow_redirects is True

    def test_reads_environment(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("TRANSLATIONS_HTTP_TIMEOUT_SECONDS", "3")
        monkeypatch.setenv("TRANSLATIONS_HTTP_USER_AGENT", "env-agent")
        loader = LoaderSettings()
        assert loader.http_timeout_seconds == 3.0
        assert loader.http_user_agent == "env-agent"


@pytest.mark.unit
class TestSettings:
    """Tests for the Settings aggregator."""

    def test_loader_subsettings_created(self):
        """Nested loader settings are instantiated automatically."""
        settings = Settings()
        assert isinstance(settings.loader, LoaderSettings)

    def test_explicit_subsettings_kept(self):
        """Passed-in subsettings are not replaced."""
        loader = LoaderSettings(TRANSLATIONS_HTTP_USER_AGENT="given")
        assert Settings(loader=loader).loader.http_user_agent == "given"

    def test_is_production(self, monkeypatch):
        """Production means an empty PREFIX."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
