"""StyleDescriptor: the structured result of resolving one utility-class string."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from typing import Any

__all__ = ["PROPERTY_NAMES", "UNSET", "StyleDescriptor"]


class _Unset:
    """Marker for a property no token specified (distinct from ``None``)."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Unset:
        return self


UNSET: Any = _Unset()

# Python attribute -> JSON key
_JSON_KEYS: dict[str, str] = {
    "width": "width",
    "height": "height",
    "min_width": "minWidth",
    "min_height": "minHeight",
    "max_width": "maxWidth",
    "max_height": "maxHeight",
    "padding_x": "paddingX",
    "padding_y": "paddingY",
    "gap": "gap",
    "border_radius": "borderRadius",
    "font_size": "fontSize",
    "font_weight": "fontWeight",
    "fill_variable": "fillVariable",
    "fill_opacity": "fillOpacity",
    "text_variable": "textVariable",
    "text_opacity": "textOpacity",
    "is_white_text": "isWhiteText",
    "has_border": "hasBorder",
    "stroke_weight": "strokeWeight",
    "stroke_variable": "strokeVariable",
    "stroke_opacity": "strokeOpacity",
    "border_style": "borderStyle",
    "dash_pattern": "dashPattern",
}
_ATTRS: dict[str, str] = {v: k for k, v in _JSON_KEYS.items()}


@dataclass
class StyleDescriptor:
    """Style properties resolved from a class string.

    Every property starts as :data:`UNSET`. ``fill_variable`` and
    ``text_variable`` may hold ``None`` for an explicit "no color"
    (``bg-transparent``, ``text-white``). ``states`` maps a state name to a
    descriptor holding only what that state's tokens set.
    """

    width: Any = UNSET
    height: Any = UNSET
    min_width: Any = UNSET
    min_height: Any = UNSET
    max_width: Any = UNSET
    max_height: Any = UNSET
    padding_x: Any = UNSET
    padding_y: Any = UNSET
    gap: Any = UNSET
    border_radius: Any = UNSET
    font_size: Any = UNSET
    font_weight: Any = UNSET
    fill_variable: Any = UNSET
    fill_opacity: Any = UNSET
    text_variable: Any = UNSET
    text_opacity: Any = UNSET
    is_white_text: Any = UNSET
    has_border: Any = UNSET
    stroke_weight: Any = UNSET
    stroke_variable: Any = UNSET
    stroke_opacity: Any = UNSET
    border_style: Any = UNSET
    dash_pattern: Any = UNSET
    states: dict[str, StyleDescriptor] = field(default_factory=dict)

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET

    def is_empty(self) -> bool:
        """True when no property and no state bucket is set."""
        return not self.states and all(getattr(self, attr) is UNSET for attr in _JSON_KEYS)

    def update(self, other: StyleDescriptor) -> None:
        """Copy every property *other* sets onto this descriptor, states included."""
        for attr in _JSON_KEYS:
            value = getattr(other, attr)
            if value is not UNSET:
                setattr(self, attr, copy.copy(value))
        for state, bucket in other.states.items():
            self.states.setdefault(state, StyleDescriptor()).update(bucket)

    def with_state(self, state: str) -> StyleDescriptor:
        """Return the base properties with the *state* bucket applied on top.

        The result carries no state buckets. An unknown *state* yields the
        base properties unchanged.
        """
        result = StyleDescriptor()
        bucket = self.states.get(state) or StyleDescriptor()
        for attr in _JSON_KEYS:
            value = getattr(bucket, attr)
            if value is UNSET:
                value = getattr(self, attr)
            setattr(result, attr, copy.copy(value))
        return result

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """camelCase JSON form; unset properties and empty states are omitted."""
        data: dict[str, Any] = {}
        for attr, key in _JSON_KEYS.items():
            value = getattr(self, attr)
            if value is not UNSET:
                data[key] = list(value) if isinstance(value, (list, tuple)) else value
        if self.states:
            data["states"] = {name: bucket.to_dict() for name, bucket in self.states.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StyleDescriptor:
        result = cls()
        for key, value in data.items():
            if key == "states":
                result.states = {name: cls.from_dict(bucket) for name, bucket in value.items()}
            elif key in _ATTRS:
                setattr(result, _ATTRS[key], value)
        return result


# Attribute names in declaration order, for callers iterating properties.
PROPERTY_NAMES: list[str] = [f.name for f in fields(StyleDescriptor) if f.name != "states"]
