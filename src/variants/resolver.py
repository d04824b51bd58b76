"""Variant resolution for locales, languages and wiki URLs."""
from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlparse

from src.variants.decomposer import decompose
from src.variants.mapping import VariantMappingTable


def resolve_variant(identifier: str | None, table: VariantMappingTable) -> str | None:
    """Best-guess variant code for a locale identifier, or None."""
    locale = decompose(identifier)
    if not locale.has_language:
        return None
    return table.lookup(locale.language_code, locale.script_code, locale.region_code)


def resolve_preferred_variant(language: str, variants: Iterable[str]) -> str | None:
    """Return the first of ``variants`` that is a hyphenated variant of ``language``.

    Order matters: the first match in preference order wins. An empty
    language never matches.
    """
    if not language:
        return None
    prefix = f"{language}-"
    for code in variants:
        if code.startswith(prefix):
            return code
    return None


def language_from_url(url: str | None) -> str | None:
    """Language code of a wiki URL, taken from the first label of its host.

    ``https://zh.wikipedia.org/wiki/X`` -> ``"zh"``
    """
    if not url:
        return None
    host = urlparse(url).hostname
    if not host or "." not in host:
        return None
    label = host.split(".", 1)[0]
    return label or None


def preferred_variant_for_url(
    url: str | None,
    variants: Iterable[str],
    url_language: str | None = None,
) -> str | None:
    """First preferred variant for the wiki a URL points at.

    Args:
        url: Wiki page URL
        variants: Preferred variant codes in priority order
        url_language: Overrides the language taken from the URL host

    Returns:
        Variant code, or None when the language has no preferred variant
    """
    language = url_language or language_from_url(url)
    if not language:
        return None
    return resolve_preferred_variant(language, variants)
