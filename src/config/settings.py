"""Centralized configuration settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

BUNDLED_MAPPING_PATH = Path(__file__).resolve().parent.parent / "variants" / "data" / "mapping.json"


@dataclass
class VariantSettings:
    """Settings for variant resolution."""
    mapping_path: Path = BUNDLED_MAPPING_PATH
    # Replaces the OS preferred-locale list when set
    preferred_locales: list[str] | None = None
    fallback_locale: str = "en"
    # Codes that resolve to the English locale (Simple English wiki, test wiki)
    english_aliases: tuple[str, ...] = ("simple", "test")


@dataclass
class APISettings:
    """API-specific settings."""
    # CORS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class Settings:
    """Main application settings container."""
    variants: VariantSettings = field(default_factory=VariantSettings)
    api: APISettings = field(default_factory=APISettings)

    # Application settings
    debug: bool = False

    def __post_init__(self):
        """Load settings from environment variables."""
        self.debug = os.environ.get("LANGVARIANT_DEBUG", "").lower() in ("true", "1", "yes")

        # Variant overrides
        if mapping_path := os.environ.get("LANGVARIANT_MAPPING_PATH"):
            self.variants.mapping_path = Path(mapping_path)
        if preferred := os.environ.get("LANGVARIANT_PREFERRED_LOCALES"):
            self.variants.preferred_locales = [p.strip() for p in preferred.split(",") if p.strip()]
        if fallback := os.environ.get("LANGVARIANT_FALLBACK_LOCALE"):
            self.variants.fallback_locale = fallback

        # API overrides
        if cors := os.environ.get("LANGVARIANT_API_CORS_ORIGINS"):
            self.api.cors_origins = [o.strip() for o in cors.split(",")]


# Global settings instance
settings = Settings()
