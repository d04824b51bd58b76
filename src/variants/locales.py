"""Locale objects for wiki language codes."""
from __future__ import annotations

import logging
import operator
import threading
from collections.abc import Mapping
from functools import cache

from babel import Locale, UnknownLocaleError
from babel.localedata import locale_identifiers
from cachetools import cachedmethod

from src.config.settings import settings
from src.variants.system import system_preferred_locales

logger = logging.getLogger(__name__)

SPECIAL_ENGLISH_CODES: tuple[str, ...] = settings.variants.english_aliases


@cache
def _available_identifiers() -> frozenset[str]:
    return frozenset(locale_identifiers())


def _parse(identifier: str) -> Locale | None:
    try:
        return Locale.parse(identifier.replace("_", "-"), sep="-")
    except (UnknownLocaleError, ValueError):
        return None


def current_locale(
    environ: Mapping[str, str] | None = None,
    fallback: str | None = None,
) -> Locale:
    """The user's current locale, re-read from the environment on every call.

    Falls back to ``fallback`` (``settings.variants.fallback_locale`` by
    default) when no preferred locale is known to the CLDR data.
    """
    for identifier in system_preferred_locales(environ):
        if (locale := _parse(identifier)) is not None:
            return locale

    fallback = fallback or settings.variants.fallback_locale
    locale = _parse(fallback)
    if locale is None:
        logger.warning("Fallback locale %r is unknown, using English", fallback)
        return Locale("en")
    return locale


def is_english(locale: Locale) -> bool:
    """True for English locales (``en`` and ``en-*``)."""
    language = locale.language or ""
    return language == "en" or language.startswith("en-")


class LocaleCache:
    """Locale objects keyed by wiki language code.

    Entries are never evicted. Lookups for a code that is neither a known
    locale identifier nor an English alias cache the locale that was current
    on first lookup.
    """

    def __init__(
        self,
        english_aliases: tuple[str, ...] = SPECIAL_ENGLISH_CODES,
        environ: Mapping[str, str] | None = None,
        fallback_locale: str | None = None,
    ):
        self.english_aliases = english_aliases
        self._environ = environ
        self._fallback_locale = fallback_locale
        self._locales: dict[str, Locale] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._locales)

    def __contains__(self, language: object) -> bool:
        with self._lock:
            return language in self._locales

    def current(self) -> Locale:
        return current_locale(self._environ, self._fallback_locale)

    def locale_for(self, language: str | None) -> Locale:
        """Locale for a wiki language code.

        Args:
            language: Wiki language code, or None for the live current locale

        Returns:
            Locale for the code; the current locale is never cached for None
        """
        if language is None:
            return self.current()
        return self._cached_locale(language)

    @cachedmethod(
        operator.attrgetter("_locales"),
        key=lambda _self, language: language,
        lock=operator.attrgetter("_lock"),
    )
    def _cached_locale(self, language: str) -> Locale:
        if language in _available_identifiers():
            locale = _parse(language)
            if locale is not None:
                return locale
        if language in self.english_aliases:
            return Locale("en")
        logger.debug("No locale for wiki language %r, using current locale", language)
        return self.current()
