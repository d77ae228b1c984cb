"""Brace-balanced scanning over component source text.

The scanner never parses the surrounding code. It counts ``{``/``}`` from a
start position, stepping over quoted strings and comments so braces inside
class strings or descriptions do not unbalance the count.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["ExportedConstants", "extract_balanced_braces", "find_exported_constants"]

_QUOTES = "\"'`"

# export const KUMO_BUTTON_VARIANTS = ...  /  export const X: Type = ...
_EXPORT_RE = re.compile(
    r"""
    export\s+const\s+
    (?P<name>[A-Z][A-Z0-9_]*)   # SCREAMING_SNAKE constant name
    \s*(?::[^=]*)?              # optional type annotation
    =\s*
    """,
    re.VERBOSE,
)

_STRING_VALUE_RE = re.compile(r"""(["'`])(?P<body>.*?)(?<!\\)\1""", re.DOTALL)


def _skip_string(content: str, index: int) -> int:
    """Return the index just past the string literal opening at *index*."""
    quote = content[index]
    i = index + 1
    while i < len(content):
        char = content[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        i += 1
    return len(content)


def extract_balanced_braces(content: str, start: int) -> str | None:
    """Return the first balanced ``{...}`` block at or after *start*, braces included.

    Returns None when no opening brace follows or the block never closes.
    """
    depth = 0
    block_start = -1
    i = start
    while i < len(content):
        char = content[i]
        if depth > 0:
            if char in _QUOTES:
                i = _skip_string(content, i)
                continue
            if content.startswith("//", i):
                newline = content.find("\n", i)
                i = len(content) if newline == -1 else newline
                continue
            if content.startswith("/*", i):
                close = content.find("*/", i + 2)
                i = len(content) if close == -1 else close + 2
                continue
        if char == "{":
            if depth == 0:
                block_start = i
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                return content[block_start : i + 1]
        i += 1
    return None


@dataclass(frozen=True)
class ExportedConstants:
    """Raw text of the conventionally named constants found in one file."""

    variants: str | None = None
    defaults: str | None = None
    styling: str | None = None
    base_styles: str | None = None


def find_exported_constants(content: str) -> ExportedConstants:
    """Locate ``*_VARIANTS``, ``*_DEFAULT_VARIANTS``, ``*_STYLING`` and ``*_BASE_STYLES``.

    The first export of each kind wins. Object constants are returned as
    their brace block; the base-styles constant as its string body.
    """
    found: dict[str, str] = {}
    for match in _EXPORT_RE.finditer(content):
        name = match.group("name")
        if name.endswith("_DEFAULT_VARIANTS"):
            kind = "defaults"
        elif name.endswith("_VARIANTS"):
            kind = "variants"
        elif name.endswith("_STYLING"):
            kind = "styling"
        elif name.endswith("_BASE_STYLES"):
            kind = "base_styles"
        else:
            continue
        if kind in found:
            continue

        if kind == "base_styles":
            value = _STRING_VALUE_RE.match(content, match.end())
            if value:
                found[kind] = value.group("body").strip()
            continue

        if content[match.end() : match.end() + 1] != "{":
            continue
        block = extract_balanced_braces(content, match.end())
        if block is not None:
            found[kind] = block

    return ExportedConstants(**found)
