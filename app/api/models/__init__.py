"""API Pydantic models."""
from app.api.models.errors import ErrorCodes, ErrorDetail, ErrorResponse
from app.api.models.requests import HeaderRequest
from app.api.models.responses import (
    HeaderResponse,
    HealthResponse,
    PreferenceListResponse,
    PreferredVariantResponse,
    VariantResolution,
)

__all__ = [
    "HeaderRequest",
    "HeaderResponse",
    "HealthResponse",
    "PreferenceListResponse",
    "PreferredVariantResponse",
    "VariantResolution",
    "ErrorResponse",
    "ErrorDetail",
    "ErrorCodes",
]
