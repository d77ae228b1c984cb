"""CSS color parsing into normalised 0-1 RGBA values.

Supported forms:
    #rgb  #rgba  #rrggbb  #rrggbbaa
    rgb(12 34 56)  rgb(12, 34, 56)  rgba(12, 34, 56, 0.5)  rgb(12 34 56 / 50%)
    oklch(62.8% 0.25 29)  oklch(0.628 0.25 29 / 0.5)
    var(--token, <fallback>)
    white  black  transparent
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace

__all__ = ["RGBA", "parse_color"]


@dataclass(frozen=True)
class RGBA:
    """A color with each channel in the 0-1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def with_alpha(self, alpha: float) -> RGBA:
        return replace(self, a=alpha)

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


_NAMED: dict[str, RGBA] = {
    "white": RGBA(1.0, 1.0, 1.0),
    "black": RGBA(0.0, 0.0, 0.0),
    "transparent": RGBA(0.0, 0.0, 0.0, 0.0),
}

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_RGB_RE = re.compile(
    r"""
    ^rgba?\(\s*
    (?P<r>[\d.]+%?)\s*[,\s]\s*
    (?P<g>[\d.]+%?)\s*[,\s]\s*
    (?P<b>[\d.]+%?)
    (?:\s*[,/]\s*(?P<a>[\d.]+%?))?
    \s*\)$
    """,
    re.VERBOSE,
)

_OKLCH_RE = re.compile(
    r"""
    ^oklch\(\s*
    (?P<l>[\d.]+)(?P<pct>%?)\s+
    (?P<c>[\d.]+)\s+
    (?P<h>[\d.]+)(?:deg)?
    (?:\s*/\s*(?P<a>[\d.]+%?))?
    \s*\)$
    """,
    re.VERBOSE,
)

_VAR_RE = re.compile(r"^var\(\s*--[\w-]+\s*,\s*(?P<fallback>.+)\)$")


def _clamp(x: float) -> float:
    return max(0.0, min(1.0, x))


def _alpha(raw: str | None) -> float:
    if raw is None:
        return 1.0
    if raw.endswith("%"):
        return _clamp(float(raw[:-1]) / 100)
    return _clamp(float(raw))


def _channel(raw: str) -> float:
    if raw.endswith("%"):
        return _clamp(float(raw[:-1]) / 100)
    return _clamp(float(raw) / 255)


def _parse_hex(digits: str) -> RGBA:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    return RGBA(*channels)


def _linear_to_srgb(x: float) -> float:
    if x <= 0.0031308:
        return 12.92 * x
    return 1.055 * math.pow(x, 1 / 2.4) - 0.055


def _oklch_to_rgba(lightness: float, chroma: float, hue: float, alpha: float) -> RGBA:
    h = math.radians(hue)
    a = chroma * math.cos(h)
    b = chroma * math.sin(h)

    l_ = lightness + 0.3963377774 * a + 0.2158037573 * b
    m_ = lightness - 0.1055613458 * a - 0.0638541728 * b
    s_ = lightness - 0.0894841775 * a - 1.2914855480 * b
    lc, mc, sc = l_**3, m_**3, s_**3

    red = 4.0767416621 * lc - 3.3077115913 * mc + 0.2309699292 * sc
    green = -1.2684380046 * lc + 2.6097574011 * mc - 0.3413193965 * sc
    blue = -0.0041960863 * lc - 0.7034186147 * mc + 1.7076147010 * sc

    return RGBA(
        _clamp(_linear_to_srgb(red)),
        _clamp(_linear_to_srgb(green)),
        _clamp(_linear_to_srgb(blue)),
        alpha,
    )


def parse_color(value: str) -> RGBA:
    """Parse a CSS color string.

    Raises ValueError for anything outside the supported forms.
    """
    text = value.strip()
    lowered = text.lower()

    if lowered in _NAMED:
        return _NAMED[lowered]

    match = _HEX_RE.match(text)
    if match:
        return _parse_hex(match.group(1))

    match = _RGB_RE.match(lowered)
    if match:
        return RGBA(
            _channel(match.group("r")),
            _channel(match.group("g")),
            _channel(match.group("b")),
            _alpha(match.group("a")),
        )

    match = _OKLCH_RE.match(lowered)
    if match:
        lightness = float(match.group("l"))
        if match.group("pct") or lightness > 1:
            lightness /= 100
        return _oklch_to_rgba(
            lightness,
            float(match.group("c")),
            float(match.group("h")),
            _alpha(match.group("a")),
        )

    match = _VAR_RE.match(text)
    if match:
        return parse_color(match.group("fallback"))

    raise ValueError(f"Unsupported color value: {value!r}")
