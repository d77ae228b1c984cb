"""Semantic color sweep over raw component source."""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = ["COLOR_UTILITY_PREFIXES", "extract_semantic_colors"]

COLOR_UTILITY_PREFIXES = ["text", "bg", "ring", "outline", "fill", "border"]


def _color_pattern(names: Iterable[str]) -> re.Pattern[str] | None:
    ordered = sorted(set(names), key=lambda n: (-len(n), n))
    if not ordered:
        return None
    prefixes = "|".join(COLOR_UTILITY_PREFIXES)
    alternatives = "|".join(re.escape(name) for name in ordered)
    # Variant prefixes (hover:, data-[state=open]:) end in ':' so the lookbehind allows them.
    return re.compile(rf"(?<![\w-])((?:{prefixes})-(?:{alternatives}))(?![a-zA-Z0-9-])")


def extract_semantic_colors(source: str, names: Iterable[str]) -> list[str]:
    """Every ``{prefix}-{semantic}`` utility in *source*, sorted and de-duplicated.

    This looks at the whole file, not just the variant tables, so classes
    applied in JSX or helper constants are counted too.
    """
    pattern = _color_pattern(names)
    if pattern is None:
        return []
    return sorted({match.group(1) for match in pattern.finditer(source)})
