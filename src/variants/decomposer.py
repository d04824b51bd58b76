"""Locale identifier decomposition."""
from __future__ import annotations

import re
from dataclasses import dataclass

from babel.core import parse_locale

_EXTLANG = re.compile(r"^[A-Za-z]{3}$")
_SCRIPT = re.compile(r"^[A-Za-z]{4}$")
_REGION = re.compile(r"^(?:[A-Za-z]{2}|[0-9]{3})$")
_VARIANT = re.compile(r"^(?:[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3})$")


@dataclass(frozen=True)
class DecomposedLocale:
    """Lowercased language/script/region subtags of a locale identifier.

    Attributes:
        language_code: Language subtag, empty when none was recognized
        script_code: Script subtag (e.g. "hant") or None
        region_code: Region subtag (e.g. "tw") or None
    """
    language_code: str
    script_code: str | None = None
    region_code: str | None = None

    @property
    def has_language(self) -> bool:
        return bool(self.language_code)


EMPTY_LOCALE = DecomposedLocale(language_code="")


def _leading_subtags(tag: str) -> str:
    """Keep the language, script and region subtags of a BCP-47 tag.

    Extended language subtags (``zh-yue``), variants (``sl-rozaj-biske``) and
    extension or private-use sections (``-u-...``, ``-x-...``) are dropped.
    A tag whose tail is not made of those is returned unchanged.
    """
    parts = tag.split("-")
    head, rest = parts[:1], parts[1:]

    extlangs = 0
    while rest and extlangs < 3 and _EXTLANG.match(rest[0]):
        rest.pop(0)
        extlangs += 1
    if rest and _SCRIPT.match(rest[0]):
        head.append(rest.pop(0))
    if rest and _REGION.match(rest[0]):
        head.append(rest.pop(0))

    for part in rest:
        if len(part) == 1:
            break
        if not _VARIANT.match(part):
            return tag
    return "-".join(head)


def decompose(identifier: str | None) -> DecomposedLocale:
    """Split a locale identifier into lowercased language, script and region.

    Accepts both BCP-47 (``zh-Hant-TW``) and POSIX (``zh_TW.UTF-8``) forms.
    Identifiers that cannot be parsed decompose to an empty language code.
    """
    if not identifier:
        return EMPTY_LOCALE

    # Encoding and modifier suffixes of POSIX locale names
    tag = identifier.strip().split(".", 1)[0].split("@", 1)[0].replace("_", "-")
    try:
        language, territory, script, _variant = parse_locale(_leading_subtags(tag), sep="-")[:4]
    except ValueError:
        return EMPTY_LOCALE
    if not language.isascii():
        return EMPTY_LOCALE

    return DecomposedLocale(
        language_code=language.lower(),
        script_code=script.lower() if script else None,
        region_code=territory.lower() if territory else None,
    )
