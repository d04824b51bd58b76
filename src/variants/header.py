"""Accept-Language header synthesis."""
from __future__ import annotations

from collections.abc import Sequence


def synthesize_header(codes: Sequence[str]) -> str:
    """Build a weighted Accept-Language value from codes in priority order.

    Weights step down evenly from 1.0 by ``1/n``; the first code carries no
    explicit weight and the rest use two significant digits.

    Example:
        synthesize_header(["en", "fr", "de"])  # "en, fr;q=0.67, de;q=0.33"
    """
    count = len(codes)
    if count == 0:
        return ""

    step = 1.0 / count
    segments = [codes[0]]
    for index, code in enumerate(codes[1:], start=1):
        q = 1.0 - index * step
        segments.append(f"{code};q={q:.2g}")
    return ", ".join(segments)
