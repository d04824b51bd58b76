"""Variant resolution endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.models.errors import ErrorCodes, ErrorResponse
from app.api.models.requests import HeaderRequest
from app.api.models.responses import (
    HeaderResponse,
    PreferenceListResponse,
    PreferredVariantResponse,
    VariantResolution,
)
from app.api.v1.deps import get_variant_context
from src.variants.context import VariantContext
from src.variants.decomposer import decompose
from src.variants.header import synthesize_header

router = APIRouter(prefix="/variants", tags=["Variants"])


def _not_found(message: str, **details: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error": {
                "code": ErrorCodes.VARIANT_NOT_FOUND,
                "message": message,
                "details": details,
            }
        },
    )


@router.get(
    "/resolve",
    response_model=VariantResolution,
    responses={
        400: {"model": ErrorResponse, "description": "Locale has no language subtag"},
        404: {"model": ErrorResponse, "description": "No variant for this locale"},
    },
    summary="Resolve a locale to its variant code",
)
async def resolve_locale(
    locale: str = Query(..., min_length=1, description="Locale identifier, e.g. zh-Hant-TW"),
    context: VariantContext = Depends(get_variant_context),
) -> VariantResolution:
    """Resolve a locale identifier through the variant mapping table."""
    parts = decompose(locale)
    if not parts.has_language:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": {
                    "code": ErrorCodes.INVALID_LOCALE,
                    "message": "The locale has no recognizable language subtag",
                    "details": {"locale": locale},
                }
            },
        )

    variant = context.resolve_variant(locale)
    if variant is None:
        raise _not_found("No variant is known for this locale", locale=locale)

    return VariantResolution(
        locale=locale,
        language=parts.language_code,
        script=parts.script_code,
        region=parts.region_code,
        variant=variant,
    )


@router.get(
    "/preferences",
    response_model=PreferenceListResponse,
    summary="Preferred languages of this process",
)
async def get_preferences(
    include_all: bool = Query(False, description="Include languages without variants"),
    context: VariantContext = Depends(get_variant_context),
) -> PreferenceListResponse:
    """Return the cached preference list derived from the OS locales."""
    if include_all:
        codes = context.preferred_language_codes()
    else:
        codes = context.preferred_variant_languages()
    return PreferenceListResponse(codes=codes, include_all=include_all)


@router.get(
    "/header",
    response_model=HeaderResponse,
    summary="Accept-Language header of this process",
)
async def get_header(
    context: VariantContext = Depends(get_variant_context),
) -> HeaderResponse:
    """Return the cached Accept-Language header for the preferred languages."""
    return HeaderResponse(header=context.accept_language_header())


@router.post(
    "/header",
    response_model=HeaderResponse,
    summary="Synthesize an Accept-Language header",
)
async def post_header(body: HeaderRequest) -> HeaderResponse:
    """Build a weighted header from codes in priority order."""
    return HeaderResponse(header=synthesize_header(body.codes))


@router.get(
    "/for-language",
    response_model=PreferredVariantResponse,
    responses={
        404: {"model": ErrorResponse, "description": "No preferred variant"},
    },
    summary="Preferred variant of a base language",
)
async def get_variant_for_language(
    language: str = Query(..., min_length=1, description="Base language code, e.g. zh"),
    preferred: list[str] | None = Query(
        None, description="Preferred variant codes in priority order"
    ),
    context: VariantContext = Depends(get_variant_context),
) -> PreferredVariantResponse:
    """Return the first preferred variant of ``language``."""
    variant = context.preferred_variant(language, preferred=preferred)
    if variant is None:
        raise _not_found("No preferred variant for this language", language=language)
    return PreferredVariantResponse(language=language, variant=variant)
