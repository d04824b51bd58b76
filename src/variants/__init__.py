"""Content language variant resolution."""
from src.variants.context import VariantContext, variant_context
from src.variants.decomposer import DecomposedLocale, decompose
from src.variants.header import synthesize_header
from src.variants.locales import LocaleCache, current_locale, is_english
from src.variants.mapping import DEFAULT_KEY, VariantMappingTable, load_mapping_table
from src.variants.preferences import build_preference_list, preferred_locale_language_codes
from src.variants.resolver import (
    language_from_url,
    preferred_variant_for_url,
    resolve_preferred_variant,
    resolve_variant,
)
from src.variants.system import system_preferred_locales

__all__ = [
    "DEFAULT_KEY",
    "DecomposedLocale",
    "LocaleCache",
    "VariantContext",
    "VariantMappingTable",
    "build_preference_list",
    "current_locale",
    "decompose",
    "is_english",
    "language_from_url",
    "load_mapping_table",
    "preferred_locale_language_codes",
    "preferred_variant_for_url",
    "resolve_preferred_variant",
    "resolve_variant",
    "synthesize_header",
    "system_preferred_locales",
    "variant_context",
]
