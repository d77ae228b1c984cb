"""Tests for variant-table extraction."""

from pathlib import Path

from variantkit.extract import VariantOption, extract, extract_file, extract_state_classes
from variantkit.extract.variants import parse_defaults_object, parse_variants_object

FIXTURES = Path(__file__).parent.parent / "fixtures"
COMPONENTS = FIXTURES / "components"


# ---------------------------------------------------------------------------
# Fixture components
# ---------------------------------------------------------------------------


class TestButtonFixture:
    def test_variant_dimensions(self):
        result = extract_file(COMPONENTS / "button" / "button.tsx")
        assert result is not None
        assert list(result.variants) == ["size", "variant"]
        assert list(result.variants["variant"]) == ["primary", "secondary", "secondary-destructive"]

    def test_option_fields(self):
        result = extract_file(COMPONENTS / "button" / "button.tsx")
        primary = result.variants["variant"]["primary"]
        assert primary.classes == "bg-kumo-brand text-white hover:bg-kumo-brand-hover"
        assert primary.description == "High-emphasis button for primary actions"
        assert primary.state_classes == {"hover": "hover:bg-kumo-brand-hover"}

    def test_defaults_and_base_styles(self):
        result = extract_file(COMPONENTS / "button" / "button.tsx")
        assert result.defaults == {"size": "base", "variant": "secondary"}
        assert result.base_styles == "inline-flex items-center font-medium"
        assert result.styling is None

    def test_props(self):
        result = extract_file(COMPONENTS / "button" / "button.tsx")
        props = result.props()
        size = props["size"]
        assert size.type == "enum"
        assert size.default == "base"
        assert size.values == ["sm", "base"]
        assert size.classes["sm"] == "h-6.5 gap-1 px-2 rounded-md text-xs"
        assert size.descriptions["base"] == "Default button size"
        assert props["variant"].state_classes == {"primary": {"hover": "hover:bg-kumo-brand-hover"}}


class TestTabsFixture:
    def test_array_variants(self):
        result = extract_file(COMPONENTS / "tabs" / "tabs.tsx")
        assert result.variants == {
            "variant": {"segmented": VariantOption(), "underline": VariantOption()}
        }
        assert result.defaults == {"variant": "segmented"}

    def test_styling_block(self):
        result = extract_file(COMPONENTS / "tabs" / "tabs.tsx")
        assert result.styling == {
            "container": {"height": 34, "borderRadius": 8, "background": "color-kumo-recessed"},
            "tab": {"paddingX": 10, "fontWeight": 500, "activeColor": "text-color-kumo-default"},
        }


# ---------------------------------------------------------------------------
# Misses
# ---------------------------------------------------------------------------


class TestMisses:
    def test_no_tables(self):
        assert extract_file(COMPONENTS / "spinner" / "spinner.tsx") is None

    def test_variants_without_defaults(self):
        assert extract("export const X_VARIANTS = { a: { b: { classes: 'c' } } };") is None

    def test_empty_variants_is_fine(self):
        result = extract("export const X_VARIANTS = {};\nexport const X_DEFAULT_VARIANTS = {};")
        assert result is not None
        assert result.variants == {}
        assert result.props() == {}

    def test_missing_file(self, tmp_path):
        assert extract_file(tmp_path / "missing.tsx") is None

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.tsx"
        path.write_bytes(b"\xff\xfe\xfa")
        assert extract_file(path) is None

    def test_styling_that_is_code_is_dropped(self):
        source = (
            "export const X_VARIANTS = {};\n"
            "export const X_DEFAULT_VARIANTS = {};\n"
            "export const X_STYLING = { height: compute() };\n"
        )
        result = extract(source)
        assert result is not None
        assert result.styling is None


# ---------------------------------------------------------------------------
# Table parsing
# ---------------------------------------------------------------------------


class TestParseVariantsObject:
    def test_only_top_level_keys_are_props(self):
        block = """{
          size: { sm: { classes: "h-6", description: "small" } },
          tone: { quiet: { classes: "bg-kumo-base" } },
        }"""
        variants = parse_variants_object(block)
        assert list(variants) == ["size", "tone"]
        assert list(variants["size"]) == ["sm"]

    def test_quoted_value_keys(self):
        block = """{ variant: { "with-dash": { classes: "a" }, 'single': { classes: 'b' } } }"""
        assert list(parse_variants_object(block)["variant"]) == ["with-dash", "single"]

    def test_multiline_classes_are_collapsed(self):
        block = '{ v: { a: { classes: "h-9\n      px-3" } } }'
        assert parse_variants_object(block)["v"]["a"].classes == "h-9 px-3"

    def test_missing_description(self):
        option = parse_variants_object('{ v: { a: { classes: "h-9" } } }')["v"]["a"]
        assert option.description == ""


class TestParseDefaultsObject:
    def test_pairs(self):
        assert parse_defaults_object("{ size: 'sm', variant: \"primary\" }") == {
            "size": "sm",
            "variant": "primary",
        }

    def test_quoted_and_hyphenated_keys(self):
        block = """{ size: "xs", "variant": "error", 'with-label': "yes" }"""
        assert parse_defaults_object(block) == {"size": "xs", "variant": "error", "with-label": "yes"}

    def test_quoted_key_default_reaches_props(self):
        source = """
export const KUMO_CHIP_VARIANTS = {
  size: { xs: { classes: "h-5" }, sm: { classes: "h-6.5" } },
  variant: { default: { classes: "bg-kumo-base" }, error: { classes: "bg-kumo-danger" } },
} as const;

export const KUMO_CHIP_DEFAULT_VARIANTS = { size: "xs", "variant": "error" } as const;
"""
        props = extract(source).props()
        assert props["size"].default == "xs"
        assert props["variant"].default == "error"


class TestStateClasses:
    def test_groups_by_state(self):
        classes = "bg-kumo-base hover:bg-kumo-tint focus-visible:ring-kumo-ring data-[state=open]:bg-kumo-control"
        assert extract_state_classes(classes) == {
            "hover": "hover:bg-kumo-tint",
            "focus": "focus-visible:ring-kumo-ring",
            "data-state": "data-[state=open]:bg-kumo-control",
        }

    def test_same_state_tokens_joined(self):
        assert extract_state_classes("hover:bg-kumo-tint hover:text-white") == {
            "hover": "hover:bg-kumo-tint hover:text-white"
        }

    def test_non_state_prefixes_skipped(self):
        assert extract_state_classes("sm:px-2 dark:bg-kumo-base h-9") == {}
