"""Health check endpoint."""
from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from app.api.models.responses import HealthResponse
from app.api.v1.deps import get_variant_context
from src.variants.context import VariantContext

router = APIRouter(tags=["Health"])

VERSION = "1.0.0"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check API health and whether the variant mapping is loaded.",
)
async def health_check(
    context: VariantContext = Depends(get_variant_context),
) -> HealthResponse:
    """Return API health status."""
    checks: dict[str, bool] = {}
    overall_status = "healthy"

    # An empty table is usable but resolves no variants
    checks["mapping_loaded"] = bool(context.table)
    if not checks["mapping_loaded"]:
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=VERSION,
        timestamp=datetime.now(UTC),
        checks=checks,
    )
