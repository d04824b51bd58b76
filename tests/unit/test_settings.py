"""Unit tests for configuration settings."""
from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from src.config.settings import BUNDLED_MAPPING_PATH, Settings


class TestSettings:
    """Tests for defaults and environment overrides."""

    def test_defaults(self):
        """Without environment variables the bundled mapping is used."""
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings()

        assert settings.variants.mapping_path == BUNDLED_MAPPING_PATH
        assert settings.variants.preferred_locales is None
        assert settings.variants.english_aliases == ("simple", "test")
        assert settings.debug is False

    def test_environment_overrides(self):
        """Environment variables override defaults."""
        env = {
            "LANGVARIANT_DEBUG": "yes",
            "LANGVARIANT_MAPPING_PATH": "/tmp/mapping.json",
            "LANGVARIANT_PREFERRED_LOCALES": "zh-Hant-TW, en-US,,fr",
            "LANGVARIANT_FALLBACK_LOCALE": "de",
            "LANGVARIANT_API_CORS_ORIGINS": "https://a.example, https://b.example",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = Settings()

        assert settings.debug is True
        assert settings.variants.mapping_path == Path("/tmp/mapping.json")
        assert settings.variants.preferred_locales == ["zh-Hant-TW", "en-US", "fr"]
        assert settings.variants.fallback_locale == "de"
        assert settings.api.cors_origins == ["https://a.example", "https://b.example"]

    def test_bundled_mapping_exists(self):
        """The bundled mapping resource ships with the package."""
        assert BUNDLED_MAPPING_PATH.is_file()
