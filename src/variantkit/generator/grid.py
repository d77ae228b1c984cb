"""Variant-set generation: one node per point of a component's variant cross product.

Layout of one section::

    +------------------------------------------------------------+
    | Title                                                      |
    |               col header   col header   col header         |
    | row label     [cell]       [cell]       [cell]             |
    | row label     [cell]       [cell]       [cell]             |
    +------------------------------------------------------------+

Every cell is as wide as the widest cell in its column and as tall as the
tallest cell in its row. The dark section repeats the light one with
instances of the light nodes, so each combination is resolved once.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from variantkit.generator.surface import DrawingSurface
from variantkit.model import ComponentSchema
from variantkit.style import PROPERTY_NAMES, StyleDescriptor, resolve
from variantkit.theme import Theme, get_theme

__all__ = [
    "COLUMN_GAP",
    "HEADER_HEIGHT",
    "LABEL_COLUMN_WIDTH",
    "MODE_GAP",
    "ROW_DIMENSIONS",
    "ROW_GAP",
    "SECTION_PADDING",
    "STATE_DIMENSION",
    "TITLE_HEIGHT",
    "Dimension",
    "GridCell",
    "VariantGrid",
    "generate",
    "styling_fallback",
]

logger = logging.getLogger(__name__)

COLUMN_GAP = 24
ROW_GAP = 16
HEADER_HEIGHT = 32
LABEL_COLUMN_WIDTH = 200
SECTION_PADDING = 40
TITLE_HEIGHT = 48
MODE_GAP = 100

# Dimensions that change a node's size go down the rows by default.
ROW_DIMENSIONS = ("size", "shape", "withLabel")
STATE_DIMENSION = "state"


@dataclass(frozen=True)
class Dimension:
    """One axis of the cross product."""

    name: str
    values: list[str]
    classes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class GridCell:
    combination: dict[str, str]
    row: int
    column: int
    style: StyleDescriptor
    node: str
    instance: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class VariantGrid:
    """Result of laying out one component's variants."""

    component: str
    rows: list[str]
    columns: list[str]
    row_keys: list[tuple[str, ...]]
    column_keys: list[tuple[str, ...]]
    row_heights: list[float]
    column_widths: list[float]
    cells: list[GridCell]
    light_section: str
    dark_section: str
    width: float
    height: float

    def cell(self, **combination: str) -> GridCell:
        """The cell whose combination includes every given ``dimension=value``."""
        for cell in self.cells:
            if all(cell.combination.get(k) == v for k, v in combination.items()):
                return cell
        raise KeyError(combination)

    def column_cells(self, column: int) -> list[GridCell]:
        return [cell for cell in self.cells if cell.column == column]

    def row_cells(self, row: int) -> list[GridCell]:
        return [cell for cell in self.cells if cell.row == row]

    def to_dict(self) -> dict[str, Any]:
        return {
            "component": self.component,
            "rows": list(self.rows),
            "columns": list(self.columns),
            "rowHeights": list(self.row_heights),
            "columnWidths": list(self.column_widths),
            "width": self.width,
            "height": self.height,
            "cells": [
                {
                    "combination": dict(cell.combination),
                    "row": cell.row,
                    "column": cell.column,
                    "x": cell.x,
                    "y": cell.y,
                    "width": cell.width,
                    "height": cell.height,
                    "style": cell.style.to_dict(),
                }
                for cell in self.cells
            ],
        }


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------


def _dimensions(schema: ComponentSchema, states: Sequence[str] | None) -> list[Dimension]:
    dimensions = [
        Dimension(name=name, values=list(prop.values), classes=dict(prop.classes))
        for name, prop in schema.variant_props.items()
    ]
    if states:
        dimensions.append(Dimension(name=STATE_DIMENSION, values=list(states)))
    return dimensions


def _split_axes(
    dimensions: list[Dimension], rows: Sequence[str] | None, columns: Sequence[str] | None
) -> tuple[list[Dimension], list[Dimension]]:
    by_name = {d.name: d for d in dimensions}
    unknown = [n for n in [*(rows or []), *(columns or [])] if n not in by_name]
    if unknown:
        raise ValueError(f"unknown variant dimension(s): {', '.join(unknown)}")
    if rows is None and columns is None:
        row_names = [d.name for d in dimensions if d.name in ROW_DIMENSIONS]
    elif rows is None:
        row_names = [d.name for d in dimensions if d.name not in columns]
    else:
        row_names = list(rows)
    if columns is None:
        column_names = [d.name for d in dimensions if d.name not in row_names]
    else:
        column_names = list(columns)
    overlap = set(row_names) & set(column_names)
    if overlap:
        raise ValueError(f"dimension(s) on both axes: {', '.join(sorted(overlap))}")
    return [by_name[n] for n in row_names], [by_name[n] for n in column_names]


def _keys(axis: list[Dimension]) -> list[tuple[str, ...]]:
    return list(itertools.product(*(d.values for d in axis)))


# styling key -> descriptor attribute, for numeric values
_STYLING_NUMBERS = {
    "width": "width",
    "height": "height",
    "minWidth": "min_width",
    "minHeight": "min_height",
    "maxWidth": "max_width",
    "maxHeight": "max_height",
    "paddingX": "padding_x",
    "paddingY": "padding_y",
    "gap": "gap",
    "borderRadius": "border_radius",
    "fontSize": "font_size",
    "fontWeight": "font_weight",
    "strokeWeight": "stroke_weight",
}
# styling key -> descriptor attribute, for variable names
_STYLING_VARIABLES = {
    "background": "fill_variable",
    "fill": "fill_variable",
    "color": "text_variable",
    "textColor": "text_variable",
    "border": "stroke_variable",
    "borderColor": "stroke_variable",
}
# Groups read first; any other nested group follows in source order.
_STYLING_PRIMARY_GROUPS = ("container", "dimensions")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def styling_fallback(styling: dict[str, Any] | None) -> StyleDescriptor:
    """Style properties declared by a component's styling metadata.

    Top-level keys are read first, then the ``container`` and ``dimensions``
    groups, then every other nested group except ``states``; the first value
    found for a property wins. ``padding`` sets both paddings. Unknown keys
    and values of the wrong type are skipped.
    """
    style = StyleDescriptor()
    if not styling:
        return style
    groups = [styling]
    groups.extend(styling[name] for name in _STYLING_PRIMARY_GROUPS if isinstance(styling.get(name), dict))
    groups.extend(
        value
        for name, value in styling.items()
        if isinstance(value, dict) and name not in _STYLING_PRIMARY_GROUPS and name != "states"
    )
    for group in groups:
        for key, value in group.items():
            if key == "padding" and _is_number(value):
                for attr in ("padding_x", "padding_y"):
                    if not style.is_set(attr):
                        setattr(style, attr, value)
            elif key in _STYLING_NUMBERS and _is_number(value):
                attr = _STYLING_NUMBERS[key]
                if not style.is_set(attr):
                    setattr(style, attr, value)
            elif key in _STYLING_VARIABLES and isinstance(value, str) and value:
                attr = _STYLING_VARIABLES[key]
                if not style.is_set(attr):
                    setattr(style, attr, value)
    if style.is_set("stroke_variable") or style.is_set("stroke_weight"):
        style.has_border = True
    return style


def _apply_fallback(style: StyleDescriptor, fallback: StyleDescriptor) -> None:
    for attr in PROPERTY_NAMES:
        if fallback.is_set(attr) and not style.is_set(attr):
            setattr(style, attr, getattr(fallback, attr))


def _resolve_cell(
    schema: ComponentSchema,
    dimensions: list[Dimension],
    combination: dict[str, str],
    theme: Theme,
    fallback: StyleDescriptor,
) -> StyleDescriptor:
    parts = [schema.base_styles or ""]
    parts.extend(d.classes.get(combination[d.name], "") for d in dimensions if d.name != STATE_DIMENSION)
    style = resolve(" ".join(p for p in parts if p), theme)
    _apply_fallback(style, fallback)
    state = combination.get(STATE_DIMENSION)
    if state is not None and state in style.states:
        return style.with_state(state)
    return style


def _variant_name(combination: dict[str, str]) -> str:
    return ", ".join(f"{name}={value}" for name, value in combination.items())


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _offsets(sizes: list[float], start: float, gap: float) -> list[float]:
    offsets = []
    position = start
    for size in sizes:
        offsets.append(position)
        position += size + gap
    return offsets


def _span(sizes: list[float], gap: float) -> float:
    return sum(sizes) + gap * max(len(sizes) - 1, 0)


def _labels(
    surface: DrawingSurface,
    section: str,
    title: str,
    row_keys: list[tuple[str, ...]],
    column_keys: list[tuple[str, ...]],
    row_y: list[float],
    column_x: list[float],
) -> None:
    title_node = surface.create_text(title)
    surface.place(title_node, section, SECTION_PADDING, SECTION_PADDING)
    header_y = SECTION_PADDING + TITLE_HEIGHT
    for key, x in zip(column_keys, column_x):
        if key:
            surface.place(surface.create_text(" / ".join(key)), section, x, header_y)
    for key, y in zip(row_keys, row_y):
        if key:
            surface.place(surface.create_text(" / ".join(key)), section, SECTION_PADDING, y)


def generate(
    schema: ComponentSchema,
    surface: DrawingSurface,
    *,
    states: Sequence[str] | None = None,
    rows: Sequence[str] | None = None,
    columns: Sequence[str] | None = None,
    theme: Theme | None = None,
) -> VariantGrid:
    """Draw every variant combination of *schema* on *surface*.

    *states* adds a synthetic ``state`` dimension (e.g. ``["default",
    "hover", "disabled"]``); a cell's state bucket is applied when its state
    value names one. Properties no class token sets are taken from the
    schema's styling metadata. *rows* and *columns* override which
    dimensions go on which axis. Raises ValueError for unknown or doubly assigned dimensions.
    """
    theme = theme or get_theme()
    dimensions = _dimensions(schema, states)
    row_axis, column_axis = _split_axes(dimensions, rows, columns)
    row_keys = _keys(row_axis)
    column_keys = _keys(column_axis)
    fallback = styling_fallback(schema.styling)

    # Resolve and measure every combination once.
    drafts: list[tuple[int, int, dict[str, str], StyleDescriptor, str, tuple[float, float]]] = []
    for r, row_key in enumerate(row_keys):
        for c, column_key in enumerate(column_keys):
            chosen = dict(zip([d.name for d in row_axis], row_key))
            chosen.update(zip([d.name for d in column_axis], column_key))
            combination = {d.name: chosen[d.name] for d in dimensions if d.name in chosen}
            style = _resolve_cell(schema, dimensions, combination, theme, fallback)
            node = surface.create_component(_variant_name(combination), style, schema.name)
            drafts.append((r, c, combination, style, node, surface.measure(node)))

    column_widths = [
        max((size[0] for _, c, _, _, _, size in drafts if c == column), default=0)
        for column in range(len(column_keys))
    ]
    row_heights = [
        max((size[1] for r, _, _, _, _, size in drafts if r == row), default=0)
        for row in range(len(row_keys))
    ]
    column_x = _offsets(column_widths, SECTION_PADDING + LABEL_COLUMN_WIDTH, COLUMN_GAP)
    row_y = _offsets(row_heights, SECTION_PADDING + TITLE_HEIGHT + HEADER_HEIGHT, ROW_GAP)
    width = SECTION_PADDING * 2 + LABEL_COLUMN_WIDTH + _span(column_widths, COLUMN_GAP)
    height = SECTION_PADDING * 2 + TITLE_HEIGHT + HEADER_HEIGHT + _span(row_heights, ROW_GAP)

    light = surface.create_section(f"{schema.name} (light)", "light")
    dark = surface.create_section(f"{schema.name} (dark)", "dark")
    for section, x in ((light, 0), (dark, width + MODE_GAP)):
        surface.resize(section, width, height)
        surface.place(section, "", x, 0)
        _labels(surface, section, schema.name, row_keys, column_keys, row_y, column_x)

    cells = []
    for r, c, combination, style, node, _ in drafts:
        surface.resize(node, column_widths[c], row_heights[r])
        surface.place(node, light, column_x[c], row_y[r])
        instance = surface.create_instance(node)
        surface.place(instance, dark, column_x[c], row_y[r])
        cells.append(
            GridCell(
                combination=combination,
                row=r,
                column=c,
                style=style,
                node=node,
                instance=instance,
                x=column_x[c],
                y=row_y[r],
                width=column_widths[c],
                height=row_heights[r],
            )
        )

    logger.debug("%s: %d variant cells (%d x %d)", schema.name, len(cells), len(row_keys), len(column_keys))
    return VariantGrid(
        component=schema.name,
        rows=[d.name for d in row_axis],
        columns=[d.name for d in column_axis],
        row_keys=row_keys,
        column_keys=column_keys,
        row_heights=row_heights,
        column_widths=column_widths,
        cells=cells,
        light_section=light,
        dark_section=dark,
        width=width,
        height=height,
    )
