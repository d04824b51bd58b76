"""API dependencies."""
from __future__ import annotations

from src.variants.context import VariantContext, variant_context


def get_variant_context() -> VariantContext:
    """Process-wide variant context.

    Tests override this dependency with an isolated context.
    """
    return variant_context
