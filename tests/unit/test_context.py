"""Unit tests for the process-wide variant context."""
from __future__ import annotations

import threading
from unittest.mock import patch

from src.variants.context import VariantContext
from src.variants.mapping import VariantMappingTable


class TestMappingTable:
    """Tests for lazy, one-time table loading."""

    def test_table_loaded_once(self, mapping_file):
        """The resource is read on first use only."""
        context = VariantContext(mapping_path=mapping_file, preferred_locales=[])
        with patch(
            "src.variants.context.load_mapping_table",
            return_value=VariantMappingTable({"zh": {"default": {"default": "zh"}}}),
        ) as mock_load:
            first = context.table
            second = context.table

        assert first is second
        mock_load.assert_called_once_with(mapping_file)

    def test_table_loaded_once_concurrently(self, mapping_file):
        """Concurrent first access loads the table once."""
        context = VariantContext(mapping_path=mapping_file, preferred_locales=[])
        tables = []
        with patch(
            "src.variants.context.load_mapping_table",
            return_value=VariantMappingTable.empty(),
        ) as mock_load:
            threads = [
                threading.Thread(target=lambda: tables.append(context.table))
                for _ in range(16)
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert mock_load.call_count == 1
        assert all(table is tables[0] for table in tables)

    def test_missing_resource_degrades(self, tmp_path):
        """A missing resource leaves the context usable."""
        context = VariantContext(
            mapping_path=tmp_path / "missing.json",
            preferred_locales=["zh-Hant-TW", "en-US"],
        )
        assert context.resolve_variant("zh-Hant-TW") is None
        assert context.preferred_variant_languages() == []
        assert context.preferred_language_codes() == ["zh", "en"]

    def test_injected_table(self):
        """A ready-made table skips loading."""
        table = VariantMappingTable({"sr": {"latn": {"default": "sr-el"}}})
        context = VariantContext(table=table, preferred_locales=["sr-Latn"])
        assert context.table is table
        assert context.preferred_variant_languages() == ["sr-el"]


class TestPreferenceSnapshots:
    """Tests for the memoized preference lists and header."""

    def test_preferred_variant_languages(self, variant_context):
        """Only languages with variants are listed."""
        assert variant_context.preferred_variant_languages() == ["zh-tw", "zh"]

    def test_preferred_language_codes(self, variant_context):
        """All languages are listed, variant code where one exists."""
        assert variant_context.preferred_language_codes() == ["zh-tw", "en", "zh", "fr"]

    def test_accept_language_header(self, variant_context):
        """The header is built from the full preference list."""
        assert variant_context.accept_language_header() == (
            "zh-tw, en;q=0.75, zh;q=0.5, fr;q=0.25"
        )

    def test_preferred_locale_language_codes(self, variant_context):
        """Language subtags are listed without deduplication."""
        assert variant_context.preferred_locale_language_codes() == ["zh", "en", "zh", "fr", "en"]

    def test_snapshot_ignores_later_os_changes(self, mapping_file):
        """Snapshots keep the preferences seen on first use."""
        env = {"LANGUAGE": "zh_TW:en_US"}
        context = VariantContext(mapping_path=mapping_file, environ=env)

        assert context.preferred_variant_languages() == ["zh"]
        header = context.accept_language_header()
        env["LANGUAGE"] = "sr_RS"

        assert context.preferred_variant_languages() == ["zh"]
        assert context.accept_language_header() == header
        assert context.os_preferred_locales() == ["sr-RS"]

    def test_snapshot_is_a_copy(self, variant_context):
        """Callers cannot modify the cached list."""
        codes = variant_context.preferred_variant_languages()
        codes.append("sr-el")
        assert variant_context.preferred_variant_languages() == ["zh-tw", "zh"]

    def test_isolated_contexts(self, mapping_file):
        """Separate contexts have separate caches."""
        first = VariantContext(mapping_path=mapping_file, preferred_locales=["sr-Latn"])
        second = VariantContext(mapping_path=mapping_file, preferred_locales=["zh-Hant-TW"])
        assert first.preferred_variant_languages() == ["sr-el"]
        assert second.preferred_variant_languages() == ["zh-tw"]


class TestPreferredVariant:
    """Tests for variant lookups through the context."""

    def test_defaults_to_preferred_variants(self, variant_context):
        """Lookups default to the cached variants-only list."""
        assert variant_context.preferred_variant("zh") == "zh-tw"
        assert variant_context.preferred_variant("sr") is None

    def test_explicit_preferences(self, variant_context):
        """An explicit list replaces the cached one."""
        assert variant_context.preferred_variant("zh", ["en", "zh-Hant", "zh-Hans"]) == "zh-Hant"

    def test_for_url(self, variant_context):
        """URL lookups use the host language."""
        assert variant_context.preferred_variant_for_url("https://zh.wikipedia.org/wiki/X") == "zh-tw"
        assert variant_context.preferred_variant_for_url("https://en.wikipedia.org/wiki/X") is None

    def test_for_url_with_language_override(self, variant_context):
        """An explicit URL language wins over the host."""
        assert variant_context.preferred_variant_for_url(
            "https://example.org/wiki/X", url_language="sr", preferred=["sr-el"]
        ) == "sr-el"

    def test_locale_for(self, variant_context):
        """Locale lookups go through the context's cache."""
        assert str(variant_context.locale_for("simple")) == "en"
        assert "simple" in variant_context.locales
