"""Utility-class resolver: class string -> StyleDescriptor.

Tokens are classified left to right against an ordered rule table. Scalar
properties follow last-token-wins; color and border tokens each set their
own sub-fields, so they compose. Nothing here raises on bad input: unknown
or malformed tokens are dropped.

Example:
    resolve("h-9 px-3 bg-kumo-brand hover:bg-kumo-brand/70").to_dict()
    # {"height": 36, "paddingX": 12, "fillVariable": "color-kumo-brand",
    #  "states": {"hover": {"fillVariable": "color-kumo-brand/70", "fillOpacity": 0.7}}}
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum

from variantkit.style.descriptor import UNSET, StyleDescriptor
from variantkit.style.states import split_variant_prefix, state_for_prefix
from variantkit.theme import Theme, as_number, get_theme
from variantkit.theme.units import REM_PX

__all__ = ["Outcome", "classify", "resolve", "unrecognized_tokens"]

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")

# {prop}-[{number}{unit?}]
_ARBITRARY_RE = re.compile(r"^(?P<prop>min-w|min-h|max-w|max-h|w|h)-\[(?P<body>.*)\]$")
_ARBITRARY_BODY_RE = re.compile(r"^(?P<num>\d+(?:\.\d+)?|\.\d+)(?P<unit>px|rem|em)?$")

_SCALE_RE = re.compile(r"^(?P<prop>h|w|size|px|py|gap)-(?P<value>\d+(?:\.\d+)?|px)$")
# Sizing keywords with no fixed pixel value (w-full, h-screen, w-1/2 ...)
_SIZE_KEYWORD_RE = re.compile(
    r"^(?:min-w|min-h|max-w|max-h|w|h|size)-(?:full|auto|fit|min|max|screen|none|dvh|svh|lvh|\d+/\d+)$"
)
_RADIUS_RE = re.compile(r"^rounded(?:-(?P<size>[\w]+))?$")
_BORDER_WIDTH_RE = re.compile(r"^border-(?P<width>\d+)$")
_BORDER_SIDE_RE = re.compile(r"^border-[trblxyse](?:-\d+)?$")
_RING_WIDTH_RE = re.compile(r"^ring-\d+$")
_OPACITY_RE = re.compile(r"^\d{1,3}$")

_ARBITRARY_PROPS = {
    "w": "width",
    "h": "height",
    "min-w": "min_width",
    "min-h": "min_height",
    "max-w": "max_width",
    "max-h": "max_height",
}
_SCALE_PROPS = {
    "w": ("width",),
    "h": ("height",),
    "size": ("width", "height"),
    "px": ("padding_x",),
    "py": ("padding_y",),
    "gap": ("gap",),
}
_RADIUS_KEYWORDS = {"full": 9999, "none": 0}
_FILL_NONE = {"transparent", "inherit"}

# text-* utilities that are neither a size nor a color
_TEXT_IGNORED = {
    "left", "center", "right", "justify", "start", "end", "wrap", "nowrap",
    "balance", "pretty", "ellipsis", "clip",
}

# Utility families that exist but carry nothing the descriptor models.
_IGNORED_PREFIXES = [
    "flex", "inline-flex", "inline", "block", "inline-block", "hidden", "grid",
    "contents", "items", "justify", "self", "content", "place", "z", "order",
    "opacity", "shadow", "transition", "duration", "ease", "delay", "animate",
    "cursor", "select", "overflow", "truncate", "whitespace", "break", "outline",
    "leading", "tracking", "font", "absolute", "relative", "fixed", "sticky",
    "static", "inset", "top", "right", "bottom", "left", "pointer-events",
    "shrink", "grow", "basis", "col", "row", "space", "divide", "underline",
    "no-underline", "line-clamp", "appearance", "resize", "sr-only", "isolate",
    "m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me", "gap-x", "gap-y",
    "rounded", "ring-offset", "ring-inset", "border-solid", "aspect", "object",
    "fill", "stroke", "scale", "rotate", "translate", "origin", "will-change",
    "group", "peer", "touch", "tabular-nums", "uppercase", "lowercase",
    "capitalize", "italic", "antialiased", "backdrop", "blur", "list", "table",
    "visible", "invisible",
]


class Outcome(Enum):
    """How a single token was classified."""

    APPLIED = "applied"
    IGNORED = "ignored"
    UNRECOGNIZED = "unrecognized"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _tokens(class_string: str) -> list[str]:
    return [token for token in _WHITESPACE_RE.split(class_string) if token]


def _split_opacity(value: str) -> tuple[str, int | None] | None:
    """Split ``name/NN``; None when the opacity part is malformed."""
    if "/" not in value:
        return value, None
    name, _, raw = value.partition("/")
    if not name or not _OPACITY_RE.match(raw) or int(raw) > 100:
        return None
    return name, int(raw)


def _opacity(level: int) -> int | float:
    return as_number(level / 100)


def _with_opacity(variable: str, level: int | None) -> str:
    return variable if level is None else f"{variable}/{level}"


def _is_ignored(token: str) -> bool:
    return any(token == prefix or token.startswith(prefix + "-") for prefix in _IGNORED_PREFIXES)


# ---------------------------------------------------------------------------
# Rules: each returns an Outcome when it claims the token, None otherwise
# ---------------------------------------------------------------------------


def _arbitrary_size(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    match = _ARBITRARY_RE.match(token)
    if not match:
        return None
    body = _ARBITRARY_BODY_RE.match(match.group("body"))
    if not body:
        return Outcome.UNRECOGNIZED
    value = float(body.group("num"))
    if body.group("unit") in ("rem", "em"):
        value *= REM_PX
    setattr(target, _ARBITRARY_PROPS[match.group("prop")], as_number(value))
    return Outcome.APPLIED


def _fixed_scale(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    if _SIZE_KEYWORD_RE.match(token):
        return Outcome.IGNORED
    match = _SCALE_RE.match(token)
    if not match:
        return None
    raw = match.group("value")
    value = theme.spacing_scale.get(raw)
    if value is None:
        value = as_number(float(raw) * theme.spacing_unit_px)
    for attr in _SCALE_PROPS[match.group("prop")]:
        setattr(target, attr, value)
    return Outcome.APPLIED


def _radius(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    match = _RADIUS_RE.match(token)
    if not match:
        return None
    size = match.group("size") or "sm"
    if size in _RADIUS_KEYWORDS:
        target.border_radius = _RADIUS_KEYWORDS[size]
    elif size in theme.radius_scale:
        target.border_radius = theme.radius_scale[size]
    else:
        return Outcome.UNRECOGNIZED
    return Outcome.APPLIED


def _font(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    if token.startswith("text-"):
        size = token[len("text-") :]
        if size in theme.font_size_scale:
            target.font_size = theme.font_size_scale[size]
            return Outcome.APPLIED
    elif token.startswith("font-"):
        weight = token[len("font-") :]
        if weight in theme.font_weight_scale:
            target.font_weight = theme.font_weight_scale[weight]
            return Outcome.APPLIED
    return None


def _background(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    if not token.startswith("bg-"):
        return None
    rest = token[len("bg-") :]
    if rest in _FILL_NONE:
        target.fill_variable = None
        return Outcome.APPLIED
    parsed = _split_opacity(rest)
    if parsed is None:
        return Outcome.UNRECOGNIZED
    name, level = parsed
    variable = theme.fill_variable(name)
    if variable is None:
        return Outcome.UNRECOGNIZED
    target.fill_variable = _with_opacity(variable, level)
    if level is not None:
        target.fill_opacity = _opacity(level)
    return Outcome.APPLIED


def _text_color(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    if not token.startswith("text-"):
        return None
    rest = token[len("text-") :]
    if rest in _TEXT_IGNORED:
        return Outcome.IGNORED
    parsed = _split_opacity(rest)
    if parsed is None:
        return Outcome.UNRECOGNIZED
    name, level = parsed
    if name == "white":
        target.text_variable = None
        target.is_white_text = True
    else:
        variable = theme.text_variable(name)
        if variable is None:
            return Outcome.UNRECOGNIZED
        target.text_variable = _with_opacity(variable, level)
    if level is not None:
        target.text_opacity = _opacity(level)
    return Outcome.APPLIED


def _stroke_color(name_part: str, target: StyleDescriptor, theme: Theme) -> Outcome:
    parsed = _split_opacity(name_part)
    if parsed is None:
        return Outcome.UNRECOGNIZED
    name, level = parsed
    variable = theme.fill_variable(name)
    if variable is None:
        return Outcome.UNRECOGNIZED
    target.has_border = True
    target.stroke_variable = _with_opacity(variable, level)
    if level is not None:
        target.stroke_opacity = _opacity(level)
    return Outcome.APPLIED


def _border(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    if token == "border":
        target.has_border = True
        if target.stroke_weight is UNSET:
            target.stroke_weight = 1
        return Outcome.APPLIED
    if not token.startswith("border-"):
        return None
    match = _BORDER_WIDTH_RE.match(token)
    if match:
        target.has_border = True
        target.stroke_weight = int(match.group("width"))
        return Outcome.APPLIED
    if token == "border-dashed":
        target.has_border = True
        target.border_style = "dashed"
        target.dash_pattern = [4, 4]
        return Outcome.APPLIED
    if token == "border-none":
        target.has_border = True
        return Outcome.APPLIED
    if token == "border-solid" or _BORDER_SIDE_RE.match(token):
        return Outcome.IGNORED
    return _stroke_color(token[len("border-") :], target, theme)


def _ring(token: str, target: StyleDescriptor, theme: Theme) -> Outcome | None:
    if token == "ring" or _RING_WIDTH_RE.match(token):
        target.has_border = True
        return Outcome.APPLIED
    if not token.startswith("ring-") or token.startswith(("ring-offset", "ring-inset")):
        return None
    return _stroke_color(token[len("ring-") :], target, theme)


_Rule = Callable[[str, StyleDescriptor, Theme], "Outcome | None"]

_RULES: list[_Rule] = [
    _arbitrary_size,
    _fixed_scale,
    _radius,
    _font,
    _background,
    _text_color,
    _border,
    _ring,
]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify(token: str, target: StyleDescriptor, theme: Theme, *, in_state: bool = False) -> Outcome:
    """Apply one token to *target* and report how it was classified.

    A recognized state prefix routes the rest of the token into
    ``target.states``; the bucket is only kept when it ends up non-empty.
    State prefixes nested inside a state are dropped.
    """
    if token.startswith("!"):
        token = token[1:]
    if not token:
        return Outcome.UNRECOGNIZED

    split = split_variant_prefix(token)
    if split is not None:
        prefix, rest = split
        state = state_for_prefix(prefix)
        if state is None or in_state:
            return Outcome.IGNORED
        bucket = target.states.get(state) or StyleDescriptor()
        outcome = classify(rest, bucket, theme, in_state=True)
        if not bucket.is_empty():
            target.states[state] = bucket
        return outcome

    for rule in _RULES:
        outcome = rule(token, target, theme)
        if outcome is not None:
            return outcome
    if _is_ignored(token):
        return Outcome.IGNORED
    return Outcome.UNRECOGNIZED


def resolve(class_string: str | None, theme: Theme | None = None) -> StyleDescriptor:
    """Resolve a space-separated utility-class string into a StyleDescriptor.

    Uses the process-wide theme unless *theme* is given.
    """
    result = StyleDescriptor()
    if not class_string:
        return result
    theme = theme if theme is not None else get_theme()
    for token in _tokens(class_string):
        if classify(token, result, theme) is Outcome.UNRECOGNIZED:
            logger.debug("Dropped unrecognized utility class %r", token)
    return result


def unrecognized_tokens(class_string: str | None, theme: Theme | None = None) -> list[str]:
    """Tokens in *class_string* that matched no rule, in source order."""
    if not class_string:
        return []
    theme = theme if theme is not None else get_theme()
    scratch = StyleDescriptor()
    return [
        token
        for token in _tokens(class_string)
        if classify(token, scratch, theme) is Outcome.UNRECOGNIZED
    ]
