"""Ordered, deduplicated language preference lists."""
from __future__ import annotations

from collections.abc import Iterable

from src.variants.decomposer import decompose
from src.variants.mapping import VariantMappingTable


def build_preference_list(
    raw_locales: Iterable[str],
    table: VariantMappingTable,
    include_languages_without_variant: bool = True,
) -> list[str]:
    """Turn raw locale identifiers into unique content language codes.

    Each locale contributes its variant code when the table has one. Otherwise
    it contributes its bare language code, but only when
    ``include_languages_without_variant`` is set. First occurrence wins.

    Args:
        raw_locales: Locale identifiers in preference order
        table: Variant mapping table
        include_languages_without_variant: Keep languages that have no variant

    Returns:
        Codes in first-seen order, without duplicates
    """
    codes: list[str] = []
    for identifier in raw_locales:
        locale = decompose(identifier)
        if not locale.has_language:
            continue

        variant = table.lookup(locale.language_code, locale.script_code, locale.region_code)
        if variant is not None:
            if variant not in codes:
                codes.append(variant)
            continue

        if include_languages_without_variant and locale.language_code not in codes:
            codes.append(locale.language_code)
    return codes


def preferred_locale_language_codes(raw_locales: Iterable[str]) -> list[str]:
    """Language subtag of every locale, in order and without deduplication.

    ``en-US`` counts as preferring ``en``.
    """
    return [
        locale.language_code
        for locale in map(decompose, raw_locales)
        if locale.has_language
    ]
