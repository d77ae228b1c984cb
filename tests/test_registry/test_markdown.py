"""Tests for the markdown reference renderer."""

from variantkit.model import (
    ComponentRegistry,
    ComponentSchema,
    PropSchema,
    SearchIndex,
    SubComponentSchema,
)
from variantkit.registry import render_markdown


def _registry(*schemas: ComponentSchema) -> ComponentRegistry:
    by_category: dict[str, list[str]] = {}
    for schema in schemas:
        by_category.setdefault(schema.category, []).append(schema.name)
    return ComponentRegistry(
        version="1.0.0",
        components={s.name: s for s in schemas},
        search=SearchIndex(by_category=by_category, by_name=sorted(s.name for s in schemas)),
    )


BUTTON = ComponentSchema(
    name="Button",
    description="Buttons trigger actions.",
    import_path="@cloudflare/kumo",
    category="Action",
    props={
        "variant": PropSchema(
            type="enum",
            default="secondary",
            values=["primary", "secondary"],
            descriptions={"primary": "Brand colored"},
            classes={"primary": "bg-kumo-brand hover:bg-kumo-brand-hover", "secondary": "bg-kumo-control"},
            state_classes={"primary": {"hover": "hover:bg-kumo-brand-hover"}},
        ),
        "label": PropSchema(type="string", required=True, description="Accessible label."),
    },
    examples=[
        '<Button variant="primary">Save</Button>',
        '<Button variant="secondary">Cancel</Button>',
        "<Button />",
    ],
    colors=["bg-kumo-brand", "bg-kumo-control"],
)


class TestRenderMarkdown:
    def test_header(self):
        text = render_markdown(_registry(BUTTON))
        assert text.startswith(
            "# Kumo Component Registry\n\n> Auto-generated component metadata for AI/agent consumption.\n\n"
        )

    def test_component_heading(self):
        text = render_markdown(_registry(BUTTON))
        assert "---\n\n### Button\n\nButtons trigger actions.\n\n**Type:** component\n" in text
        assert '**Import:** `import { Button } from "@cloudflare/kumo";`' in text
        assert "**Category:** Action" in text

    def test_props(self):
        text = render_markdown(_registry(BUTTON))
        assert "- `variant`: enum [default: secondary]\n" in text
        assert '  - `"primary"`: Brand colored\n' in text
        assert "- `label`: string (required)\n  Accessible label.\n" in text

    def test_state_classes(self):
        text = render_markdown(_registry(BUTTON))
        assert '  **State Classes:**\n  - `"primary"`:\n    - `hover`: `hover:bg-kumo-brand-hover`\n' in text

    def test_colors(self):
        text = render_markdown(_registry(BUTTON))
        assert "**Colors (kumo tokens used):**\n\n`bg-kumo-brand`, `bg-kumo-control`\n" in text

    def test_examples_filtered_and_deduplicated(self):
        text = render_markdown(_registry(BUTTON))
        assert '```tsx\n<Button variant="primary">Save</Button>\n```' in text
        assert "Cancel" not in text
        assert "<Button />" not in text

    def test_quick_reference(self):
        text = render_markdown(_registry(BUTTON))
        assert text.endswith("## Quick Reference\n\n**Components by Category:**\n- **Action:** Button\n")

    def test_styling(self):
        schema = ComponentSchema(
            name="Tabs",
            styling={
                "dimensions": "34px",
                "baseTokens": ["bg-kumo-recessed", "text-kumo-default"],
                "states": {"active": ["bg-kumo-base"]},
                "sizeVariants": {"sm": {"height": 28, "classes": "h-7"}},
                "container": {"height": 34},
            },
        )
        text = render_markdown(_registry(schema))
        assert "- **Dimensions:** `34px`" in text
        assert "- **Base Tokens:** `bg-kumo-recessed`, `text-kumo-default`" in text
        assert "  - `active`: `bg-kumo-base`" in text
        assert "  - `sm`:\n    - Height: 28px\n    - Classes: `h-7`" in text
        assert '- **container:** `{"height": 34}`' in text

    def test_sub_components(self):
        schema = ComponentSchema(
            name="Dialog",
            sub_components={
                "Title": SubComponentSchema(
                    name="Title",
                    description="Title sub-component",
                    props={"children": PropSchema(type="ReactNode", required=True, description="Heading.")},
                ),
            },
        )
        text = render_markdown(_registry(schema))
        assert "This is a compound component. Use these sub-components:" in text
        assert "#### Dialog.Title\n\nTitle sub-component\n\nProps:\n- `children`: ReactNode (required) - Heading.\n" in text
