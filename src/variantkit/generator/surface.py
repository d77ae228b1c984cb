"""Drawing surface protocol and a recording implementation.

The generator never talks to a design tool directly. It issues node
operations against a DrawingSurface; RecordingSurface keeps them as a plan
that a design-tool plugin can replay.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Protocol

from variantkit.style import StyleDescriptor
from variantkit.theme import as_number

__all__ = ["DrawingSurface", "Operation", "RecordingSurface", "estimate_size"]

DEFAULT_FONT_SIZE = 14
CHAR_WIDTH_EM = 0.6
LINE_HEIGHT_EM = 1.5


class DrawingSurface(Protocol):
    """Node creation and placement on a design canvas."""

    def create_section(self, name: str, mode: str) -> str: ...

    def create_component(self, name: str, style: StyleDescriptor, text: str) -> str: ...

    def create_instance(self, component: str) -> str: ...

    def create_text(self, text: str) -> str: ...

    def measure(self, node: str) -> tuple[float, float]: ...

    def resize(self, node: str, width: float, height: float) -> None: ...

    def place(self, node: str, parent: str, x: float, y: float) -> None: ...


def _clamp(value: float, low: Any, high: Any) -> float:
    if isinstance(low, (int, float)) and not isinstance(low, bool):
        value = max(value, low)
    if isinstance(high, (int, float)) and not isinstance(high, bool):
        value = min(value, high)
    return value


def _number(value: Any, default: float = 0) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return default


def estimate_size(style: StyleDescriptor, text: str) -> tuple[int | float, int | float]:
    """Natural size of a node showing *text* in *style*.

    Explicit width and height win. Otherwise the size is estimated from the
    font size, padding and stroke weight, then clamped to the min/max bounds.
    """
    font_size = _number(style.font_size, DEFAULT_FONT_SIZE)
    stroke = _number(style.stroke_weight) if style.has_border is True else 0
    if style.is_set("width"):
        width = _number(style.width)
    else:
        width = len(text) * font_size * CHAR_WIDTH_EM + 2 * _number(style.padding_x) + 2 * stroke
    if style.is_set("height"):
        height = _number(style.height)
    else:
        height = font_size * LINE_HEIGHT_EM + 2 * _number(style.padding_y) + 2 * stroke
    width = _clamp(width, style.min_width, style.max_width)
    height = _clamp(height, style.min_height, style.max_height)
    return as_number(round(width, 2)), as_number(round(height, 2))


@dataclass(frozen=True)
class Operation:
    """One recorded surface call."""

    op: str
    node: str
    args: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "node": self.node, **self.args}


class RecordingSurface:
    """DrawingSurface that records every operation in order.

    Node ids are ``n1``, ``n2`` ... in creation order. Sizes come from
    :func:`estimate_size` and follow later resize calls.
    """

    def __init__(self) -> None:
        self._operations: list[Operation] = []
        self._sizes: dict[str, tuple[float, float]] = {}
        self._components: dict[str, str] = {}
        self._counter = 0

    def _new_node(self) -> str:
        self._counter += 1
        return f"n{self._counter}"

    def _record(self, op: str, node: str, **args: Any) -> None:
        self._operations.append(Operation(op=op, node=node, args=args))

    # ---- creation ----

    def create_section(self, name: str, mode: str) -> str:
        node = self._new_node()
        self._sizes[node] = (0, 0)
        self._record("section", node, name=name, mode=mode)
        return node

    def create_component(self, name: str, style: StyleDescriptor, text: str) -> str:
        node = self._new_node()
        self._sizes[node] = estimate_size(style, text)
        self._record("component", node, name=name, text=text, style=style.to_dict())
        return node

    def create_instance(self, component: str) -> str:
        if component not in self._sizes:
            raise KeyError(f"unknown component node {component!r}")
        node = self._new_node()
        self._sizes[node] = self._sizes[component]
        self._components[node] = component
        self._record("instance", node, component=component)
        return node

    def create_text(self, text: str) -> str:
        node = self._new_node()
        self._sizes[node] = estimate_size(StyleDescriptor(), text)
        self._record("text", node, text=text)
        return node

    # ---- layout ----

    def measure(self, node: str) -> tuple[float, float]:
        return self._sizes[node]

    def resize(self, node: str, width: float, height: float) -> None:
        self._sizes[node] = (width, height)
        self._record("resize", node, width=width, height=height)

    def place(self, node: str, parent: str, x: float, y: float) -> None:
        self._record("place", node, parent=parent, x=x, y=y)

    # ---- export ----

    def operations(self, op: str | None = None) -> list[Operation]:
        """Recorded operations, optionally only those of kind *op*."""
        return [o for o in self._operations if op is None or o.op == op]

    def instance_of(self, node: str) -> str | None:
        return self._components.get(node)

    def to_dict(self) -> dict[str, Any]:
        return {"operations": [o.to_dict() for o in self._operations]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2) + "\n"
