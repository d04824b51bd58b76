"""API response models."""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class VariantResolution(BaseModel):
    """A locale identifier and the variant it resolves to."""

    locale: str = Field(..., description="Locale identifier as given")
    language: str = Field(..., description="Lowercased language subtag")
    script: str | None = Field(default=None, description="Lowercased script subtag")
    region: str | None = Field(default=None, description="Lowercased region subtag")
    variant: str = Field(..., description="Content variant code")


class PreferenceListResponse(BaseModel):
    """Preferred languages in priority order."""

    codes: list[str] = Field(default_factory=list)
    include_all: bool = Field(
        default=False, description="Whether languages without variants are included"
    )


class HeaderResponse(BaseModel):
    """Synthesized Accept-Language header."""

    header: str = Field(..., description="Accept-Language header value")


class PreferredVariantResponse(BaseModel):
    """Preferred variant for a base language."""

    language: str
    variant: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"]
    version: str
    timestamp: datetime
    checks: dict[str, bool] = Field(default_factory=dict)
