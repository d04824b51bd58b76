"""Operating-system locale preferences."""
from __future__ import annotations

import os
from collections.abc import Mapping

# gettext lookup order: LANGUAGE is a list, the rest hold a single locale
_LIST_VARIABLE = "LANGUAGE"
_SINGLE_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = {"c", "posix"}


def _clean(name: str) -> str | None:
    name = name.strip().split(".", 1)[0].split("@", 1)[0]
    if not name or name.lower() in _NEUTRAL_LOCALES:
        return None
    return name.replace("_", "-")


def system_preferred_locales(environ: Mapping[str, str] | None = None) -> list[str]:
    """Locale identifiers the user prefers, most preferred first.

    Reads the colon-separated ``LANGUAGE`` list, then the first set variable of
    ``LC_ALL``, ``LC_MESSAGES`` and ``LANG``. POSIX names are returned in
    hyphenated form (``zh_TW.UTF-8`` -> ``zh-TW``).
    """
    if environ is None:
        environ = os.environ

    names: list[str] = []
    names.extend(environ.get(_LIST_VARIABLE, "").split(":"))
    for variable in _SINGLE_VARIABLES:
        if value := environ.get(variable):
            names.append(value)
            break

    preferred: list[str] = []
    for name in names:
        cleaned = _clean(name)
        if cleaned and cleaned not in preferred:
            preferred.append(cleaned)
    return preferred
