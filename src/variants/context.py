"""Process-wide variant state: the mapping table and the preference snapshots."""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path

from babel import Locale

from src.config.settings import settings
from src.variants.header import synthesize_header
from src.variants.locales import LocaleCache
from src.variants.mapping import VariantMappingTable, load_mapping_table
from src.variants.preferences import build_preference_list, preferred_locale_language_codes
from src.variants.resolver import (
    preferred_variant_for_url,
    resolve_preferred_variant,
    resolve_variant,
)
from src.variants.system import system_preferred_locales

logger = logging.getLogger(__name__)


class VariantContext:
    """Owns the mapping table and every process-wide cache.

    The table is loaded on first use and never changes afterwards. Preference
    lists and the Accept-Language header are computed once from the OS
    preferred locales and kept for the lifetime of the context, even if the
    OS preferences change later.

    Usage:
        context = VariantContext(preferred_locales=["zh-Hant-TW", "en-US"])
        context.preferred_variant_languages()  # ["zh-tw"]
        context.accept_language_header()       # "zh-tw, en;q=0.5"
    """

    def __init__(
        self,
        mapping_path: str | Path | None = None,
        preferred_locales: Iterable[str] | None = None,
        environ: Mapping[str, str] | None = None,
        table: VariantMappingTable | None = None,
    ):
        self.mapping_path = Path(mapping_path) if mapping_path else settings.variants.mapping_path
        self._preferred_locales = list(preferred_locales) if preferred_locales is not None else None
        self._environ = environ
        self._table = table
        self._table_lock = threading.Lock()
        self._lock = threading.Lock()
        self._variant_languages: list[str] | None = None
        self._language_codes: list[str] | None = None
        self._header: str | None = None
        self.locales = LocaleCache(environ=environ)

    @property
    def table(self) -> VariantMappingTable:
        """Mapping table, loaded exactly once."""
        if self._table is None:
            with self._table_lock:
                if self._table is None:
                    self._table = load_mapping_table(self.mapping_path)
        return self._table

    def os_preferred_locales(self) -> list[str]:
        """Raw preferred locale identifiers, read now."""
        if self._preferred_locales is not None:
            return list(self._preferred_locales)
        if self._environ is None and settings.variants.preferred_locales is not None:
            return list(settings.variants.preferred_locales)
        return system_preferred_locales(self._environ)

    def preferred_variant_languages(self) -> list[str]:
        """Preferred languages that have variants, as variant codes."""
        if self._variant_languages is None:
            codes = build_preference_list(
                self.os_preferred_locales(),
                self.table,
                include_languages_without_variant=False,
            )
            logger.debug("Preferred variant languages: %s", codes)
            with self._lock:
                self._variant_languages = codes
        return list(self._variant_languages)

    def preferred_language_codes(self) -> list[str]:
        """All preferred wiki languages, variant code where one exists."""
        if self._language_codes is None:
            codes = build_preference_list(
                self.os_preferred_locales(),
                self.table,
                include_languages_without_variant=True,
            )
            logger.debug("Preferred language codes: %s", codes)
            with self._lock:
                self._language_codes = codes
        return list(self._language_codes)

    def preferred_locale_language_codes(self) -> list[str]:
        """Language subtags of the OS preferred locales, read now."""
        return preferred_locale_language_codes(self.os_preferred_locales())

    def accept_language_header(self) -> str:
        """Accept-Language header value for the preferred languages."""
        if self._header is None:
            header = synthesize_header(self.preferred_language_codes())
            logger.debug("Accept-Language header: %s", header)
            with self._lock:
                self._header = header
        return self._header

    def resolve_variant(self, identifier: str | None) -> str | None:
        return resolve_variant(identifier, self.table)

    def preferred_variant(self, language: str, preferred: Iterable[str] | None = None) -> str | None:
        """First preferred variant of ``language``.

        ``preferred`` defaults to the preferred variant languages.
        """
        if preferred is None:
            preferred = self.preferred_variant_languages()
        return resolve_preferred_variant(language, preferred)

    def preferred_variant_for_url(
        self,
        url: str | None,
        url_language: str | None = None,
        preferred: Iterable[str] | None = None,
    ) -> str | None:
        if preferred is None:
            preferred = self.preferred_variant_languages()
        return preferred_variant_for_url(url, preferred, url_language=url_language)

    def locale_for(self, language: str | None) -> Locale:
        return self.locales.locale_for(language)


# Global context instance
variant_context = VariantContext()
