"""Shared test fixtures and configuration."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.variants.context import VariantContext
from src.variants.mapping import VariantMappingTable

MAPPING = {
    "zh": {
        "hant": {"tw": "zh-tw", "default": "zh-hant"},
        "default": {"default": "zh"},
    },
    "sr": {
        "cyrl": {"default": "sr-ec"},
        "latn": {"default": "sr-el"},
        "default": {"default": "sr-ec"},
    },
}


@pytest.fixture
def mapping_data() -> dict:
    """Return a small mapping with zh and sr variants."""
    return json.loads(json.dumps(MAPPING))


@pytest.fixture
def mapping_table(mapping_data: dict) -> VariantMappingTable:
    """Return a mapping table built from mapping_data."""
    return VariantMappingTable(mapping_data)


@pytest.fixture
def empty_table() -> VariantMappingTable:
    """Return a table with no entries."""
    return VariantMappingTable.empty()


@pytest.fixture
def mapping_file(tmp_path: Path, mapping_data: dict) -> Path:
    """Write mapping_data to a JSON file and return its path."""
    path = tmp_path / "mapping.json"
    path.write_text(json.dumps(mapping_data), encoding="utf-8")
    return path


@pytest.fixture
def preferred_locales() -> list[str]:
    """Return an OS preferred-locale list mixing variant and plain languages."""
    return ["zh-Hant-TW", "en-US", "zh-Hans-CN", "fr", "en-GB"]


@pytest.fixture
def variant_context(mapping_file: Path, preferred_locales: list[str]) -> VariantContext:
    """Return an isolated context over mapping_file and preferred_locales."""
    return VariantContext(mapping_path=mapping_file, preferred_locales=preferred_locales)
