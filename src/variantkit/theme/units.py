"""Length parsing shared by the theme loader and the style resolver."""

from __future__ import annotations

import re

REM_PX = 16

_LENGTH_RE = re.compile(r"^(?P<num>-?\d+(?:\.\d+)?|-?\.\d+)(?P<unit>px|rem|em)?$")

# calc(a / b), calc(a * b), ... with two plain or unit-suffixed operands
_CALC_RE = re.compile(
    r"""
    ^calc\(\s*
    (?P<left>[^\s*/+-][^\s]*)\s*
    (?P<op>[*/+-])\s*
    (?P<right>[^\s)]+)\s*
    \)$
    """,
    re.VERBOSE,
)


def as_number(value: float) -> int | float:
    """Return *value* as an int when it is integral, so JSON output stays clean."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_length(value: str | int | float) -> int | float:
    """Convert a CSS length to pixels.

    Accepts plain numbers, ``px``, ``rem`` and ``em`` (both at a 16px base),
    and a single binary ``calc()`` expression. Raises ValueError otherwise.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid length: {value!r}")
    if isinstance(value, (int, float)):
        return as_number(float(value))

    text = value.strip()
    match = _LENGTH_RE.match(text)
    if match:
        number = float(match.group("num"))
        if match.group("unit") in ("rem", "em"):
            number *= REM_PX
        return as_number(number)

    match = _CALC_RE.match(text)
    if match:
        left = float(parse_length(match.group("left")))
        right = float(parse_length(match.group("right")))
        op = match.group("op")
        if op == "*":
            result = left * right
        elif op == "/":
            if right == 0:
                raise ValueError(f"Division by zero in {value!r}")
            result = left / right
        elif op == "+":
            result = left + right
        else:
            result = left - right
        return as_number(result)

    raise ValueError(f"Invalid length: {value!r}")
