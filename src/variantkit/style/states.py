"""Variant prefix recognition shared by the resolver and the source extractor."""

from __future__ import annotations

import re

__all__ = ["STATE_NAMES", "split_variant_prefix", "state_for_prefix"]

STATE_NAMES = [
    "hover",
    "focus",
    "active",
    "disabled",
    "not-disabled",
    "pressed",
    "data-state",
    "data-pressed",
]

_SIMPLE_STATES = {
    "hover": "hover",
    "focus": "focus",
    "focus-visible": "focus",
    "focus-within": "focus",
    "active": "active",
    "disabled": "disabled",
    "not-disabled": "not-disabled",
    "pressed": "pressed",
}

_DATA_STATE_RE = re.compile(r"^data-\[state=[\w-]+\]$")
_DATA_PRESSED_RE = re.compile(r"^data-\[pressed\]$")
# Arbitrary selector variants such as [&:hover:not(:disabled)]
_SELECTOR_RE = re.compile(r"^\[&:(?P<pseudo>hover|focus(?:-visible|-within)?)\b.*\]$")


def split_variant_prefix(token: str) -> tuple[str, str] | None:
    """Split ``prefix:rest`` at the first colon outside square brackets.

    Returns None when the token carries no variant prefix.
    """
    depth = 0
    for index, char in enumerate(token):
        if char == "[":
            depth += 1
        elif char == "]":
            depth = max(depth - 1, 0)
        elif char == ":" and depth == 0:
            if index == 0:
                return None
            return token[:index], token[index + 1 :]
    return None


def state_for_prefix(prefix: str) -> str | None:
    """Map a variant prefix to its state name, or None for non-state variants."""
    if prefix in _SIMPLE_STATES:
        return _SIMPLE_STATES[prefix]
    if _DATA_STATE_RE.match(prefix):
        return "data-state"
    if _DATA_PRESSED_RE.match(prefix):
        return "data-pressed"
    match = _SELECTOR_RE.match(prefix)
    if match:
        return "hover" if match.group("pseudo") == "hover" else "focus"
    return None
