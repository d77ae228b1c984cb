"""Render the registry as a markdown reference for AI agents."""

from __future__ import annotations

import json
from typing import Any

from variantkit.extract import cleanup_example, example_signature, should_include_example
from variantkit.model import ComponentRegistry, ComponentSchema, PropSchema, SubComponentSchema

__all__ = ["render_markdown"]

HEADER = "# Kumo Component Registry\n\n> Auto-generated component metadata for AI/agent consumption.\n\n"

# Styling keys with a dedicated rendering, in output order.
_STYLING_KEYS = ("dimensions", "borderRadius", "baseTokens", "states", "icons", "inputStyles", "sizeVariants")


def _ticks(values: list[Any]) -> str:
    return "`" + "`, `".join(str(v) for v in values) + "`"


def _prop_line(name: str, prop: PropSchema) -> str:
    required = " (required)" if prop.required else ""
    default = f" [default: {prop.default}]" if prop.default else ""
    return f"- `{name}`: {prop.type}{required}{default}"


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _props(schema: ComponentSchema) -> list[str]:
    lines = ["**Props:**", ""]
    for name, prop in schema.props.items():
        lines.append(_prop_line(name, prop))
        if prop.values and prop.descriptions:
            for value in prop.values:
                if prop.descriptions.get(value):
                    lines.append(f'  - `"{value}"`: {prop.descriptions[value]}')
        elif prop.description:
            lines.append(f"  {prop.description}")
        if prop.state_classes:
            lines.extend(["", "  **State Classes:**"])
            for value, states in prop.state_classes.items():
                lines.append(f'  - `"{value}"`:')
                for state, classes in states.items():
                    lines.append(f"    - `{state}`: `{classes}`")
    return lines


def _size_variant(name: str, data: dict[str, Any]) -> list[str]:
    lines = [f"  - `{name}`:"]
    if data.get("height"):
        lines.append(f"    - Height: {data['height']}px")
    if data.get("classes"):
        lines.append(f"    - Classes: `{data['classes']}`")
    if data.get("buttonSize"):
        lines.append(f"    - Button Size: `{data['buttonSize']}`")
    if data.get("dimensions"):
        lines.append("    - Dimensions:")
        lines.extend(f"      - {key}: {value}" for key, value in data["dimensions"].items())
    return lines


def _styling(styling: dict[str, Any]) -> list[str]:
    lines = ["", "**Styling:**", ""]
    if styling.get("dimensions"):
        lines.append(f"- **Dimensions:** `{styling['dimensions']}`")
    if styling.get("borderRadius"):
        lines.append(f"- **Border Radius:** `{styling['borderRadius']}`")
    if styling.get("baseTokens"):
        lines.append(f"- **Base Tokens:** {_ticks(styling['baseTokens'])}")
    if styling.get("states"):
        lines.append("- **States:**")
        lines.extend(f"  - `{state}`: {_ticks(tokens)}" for state, tokens in styling["states"].items())
    if styling.get("icons"):
        lines.append("- **Icons:**")
        for icon in styling["icons"]:
            state = f" ({icon['state']})" if icon.get("state") else ""
            size = f" size {icon['size']}" if icon.get("size") else ""
            lines.append(f"  - `{icon.get('name', '')}`{state}{size}")
    inputs = styling.get("inputStyles")
    if inputs:
        lines.append("- **Input Styles:**")
        if inputs.get("base"):
            lines.append(f"  - Base: `{inputs['base']}`")
        if inputs.get("sizes"):
            lines.append("  - Sizes:")
            lines.extend(f"    - `{size}`: `{classes}`" for size, classes in inputs["sizes"].items())
    if styling.get("sizeVariants"):
        lines.append("- **Size Variants:**")
        for name, data in styling["sizeVariants"].items():
            lines.extend(_size_variant(name, data))
    for key, value in styling.items():
        if key not in _STYLING_KEYS:
            lines.append(f"- **{key}:** `{json.dumps(value, sort_keys=True)}`")
    return lines


def _sub_component(parent: str, sub: SubComponentSchema) -> list[str]:
    lines = [f"#### {parent}.{sub.name}", "", sub.description, ""]
    if sub.props:
        lines.append("Props:")
        for name, prop in sub.props.items():
            line = _prop_line(name, prop)
            if prop.description:
                line += f" - {prop.description}"
            lines.append(line)
        lines.append("")
    return lines


def _examples(schema: ComponentSchema) -> list[str]:
    lines: list[str] = []
    seen: set[str] = set()
    for example in schema.examples:
        if not should_include_example(example, schema.name):
            continue
        signature = example_signature(example)
        if signature in seen:
            continue
        seen.add(signature)
        lines.extend(["```tsx", cleanup_example(example), "```", ""])
    return ["", "**Examples:**", "", *lines] if lines else []


def _component(schema: ComponentSchema) -> str:
    name = schema.name
    lines = [
        "---",
        "",
        f"### {name}",
        "",
        schema.description,
        "",
        f"**Type:** {schema.type.value}",
        "",
        f'**Import:** `import {{ {name} }} from "{schema.import_path}";`',
        "",
        f"**Category:** {schema.category}",
        "",
    ]
    lines.extend(_props(schema))
    if schema.colors:
        lines.extend(["", "**Colors (kumo tokens used):**", "", _ticks(schema.colors)])
    if schema.styling:
        lines.extend(_styling(schema.styling))
    if schema.sub_components:
        lines.extend(
            ["", "**Sub-Components:**", "", "This is a compound component. Use these sub-components:", ""]
        )
        for sub in schema.sub_components.values():
            lines.extend(_sub_component(name, sub))
    lines.extend(_examples(schema))
    return "\n".join(lines) + "\n\n"


def render_markdown(registry: ComponentRegistry) -> str:
    """The full markdown reference: one section per component and block, then a category index."""
    parts = [HEADER]
    for schema in [*registry.components.values(), *registry.blocks.values()]:
        parts.append(_component(schema))
    parts.append("## Quick Reference\n\n**Components by Category:**\n")
    for category, names in registry.search.by_category.items():
        parts.append(f"- **{category}:** {', '.join(names)}\n")
    return "".join(parts)
