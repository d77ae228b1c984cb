"""Name conversions between directory names, component names and constants."""

from __future__ import annotations

import re

__all__ = ["to_pascal_case", "to_screaming_snake_case"]


def to_pascal_case(name: str) -> str:
    """``clipboard-text`` -> ``ClipboardText``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("-"))


def to_screaming_snake_case(name: str) -> str:
    """``ClipboardText`` -> ``CLIPBOARD_TEXT``."""
    name = re.sub(r"([a-z])([A-Z])", r"\1_\2", name)
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return name.upper()
