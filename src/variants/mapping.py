"""Language/script/region lookup table for content variant codes."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"


def _is_string_table(value: object, depth: int) -> bool:
    """Check that value is a ``depth``-level nested mapping ending in strings."""
    if depth == 0:
        return isinstance(value, str)
    if not isinstance(value, Mapping):
        return False
    return all(
        isinstance(key, str) and _is_string_table(inner, depth - 1)
        for key, inner in value.items()
    )


def _freeze(data: Mapping, depth: int) -> Mapping:
    if depth == 1:
        return MappingProxyType({key.lower(): value for key, value in data.items()})
    return MappingProxyType({
        key.lower(): _freeze(inner, depth - 1)
        for key, inner in data.items()
    })


class VariantMappingTable:
    """Immutable three-level table: language -> script -> region -> variant.

    Each level may carry a ``"default"`` key that is consulted only when the
    requested code (or no code at all) is not present at that level. All keys
    are stored lowercased and lookups lowercase their inputs.

    Usage:
        table = VariantMappingTable({"zh": {"hant": {"tw": "zh-tw"}}})
        table.lookup("zh", "Hant", "TW")  # "zh-tw"
    """

    def __init__(self, data: Mapping[str, Mapping[str, Mapping[str, str]]] | None = None):
        data = data or {}
        if not _is_string_table(data, 3):
            raise ValueError("Variant mapping must be a three-level table of strings")
        self._languages: Mapping[str, Mapping[str, Mapping[str, str]]] = _freeze(data, 3)

    @classmethod
    def empty(cls) -> VariantMappingTable:
        return cls()

    def __len__(self) -> int:
        return len(self._languages)

    def __bool__(self) -> bool:
        return bool(self._languages)

    def __contains__(self, language_code: object) -> bool:
        return isinstance(language_code, str) and language_code.lower() in self._languages

    def languages(self) -> list[str]:
        """Language codes that have at least one variant entry."""
        return list(self._languages)

    def lookup(
        self,
        language_code: str | None,
        script_code: str | None = None,
        region_code: str | None = None,
    ) -> str | None:
        """Find the variant code for a language, script and region.

        Args:
            language_code: Language subtag (e.g. "zh")
            script_code: Optional script subtag (e.g. "Hant")
            region_code: Optional region subtag (e.g. "TW")

        Returns:
            Variant code, or None when any level has neither the requested
            key nor a default
        """
        if not language_code:
            return None

        scripts = self._languages.get(language_code.lower())
        if scripts is None:
            return None

        regions = _select(scripts, script_code)
        if regions is None:
            return None

        return _select(regions, region_code)


def _select(level: Mapping, code: str | None):
    if code:
        exact = level.get(code.lower())
        if exact is not None:
            return exact
    return level.get(DEFAULT_KEY)


def load_mapping_table(path: str | Path | None) -> VariantMappingTable:
    """Load the mapping resource from a JSON file.

    A missing, unreadable or malformed resource yields an empty table.
    """
    if path is None:
        logger.warning("No variant mapping resource configured, variant lookups are disabled")
        return VariantMappingTable.empty()

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        table = VariantMappingTable(data)
    except FileNotFoundError:
        logger.warning("Variant mapping resource not found: %s", path)
        return VariantMappingTable.empty()
    except (OSError, UnicodeDecodeError, ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError, deep nesting raises RecursionError
        logger.warning("Variant mapping resource %s could not be loaded: %s", path, e)
        return VariantMappingTable.empty()

    logger.debug("Loaded variant mapping for %d languages from %s", len(table), path)
    return table
