"""API request models."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class HeaderRequest(BaseModel):
    """Request body for Accept-Language synthesis."""

    codes: list[str] = Field(
        ...,
        description="Language or variant codes in priority order",
        examples=[["zh-tw", "en", "fr"]],
    )

    @field_validator("codes")
    @classmethod
    def validate_codes(cls, v: list[str]) -> list[str]:
        """Reject blank codes."""
        codes = [code.strip() for code in v]
        if any(not code for code in codes):
            raise ValueError("Language codes must not be blank")
        return codes
