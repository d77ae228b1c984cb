"""Tests for story example mining and cleanup."""

from pathlib import Path

from variantkit.extract import (
    cleanup_example,
    example_signature,
    extract_story_examples,
    should_include_example,
)
from variantkit.extract.stories import render_example

FIXTURES = Path(__file__).parent.parent / "fixtures"
STORIES = (FIXTURES / "components" / "button" / "button.stories.tsx").read_text()


class TestRenderExample:
    def test_children(self):
        assert render_example("Button", {"variant": "primary", "children": "Save"}) == (
            '<Button variant="primary">Save</Button>'
        )

    def test_self_closing(self):
        assert render_example("Input", {"placeholder": "Name"}) == '<Input placeholder="Name" />'

    def test_value_kinds(self):
        example = render_example(
            "Meter", {"value": 40, "striped": True, "animated": False, "items": ["a"], "hint": None}
        )
        assert example == '<Meter value={40} striped animated={false} items={["a"]} />'

    def test_string_with_quote(self):
        assert render_example("Text", {"title": 'say "hi"'}) == '<Text title={"say \\"hi\\""} />'


class TestCleanupExample:
    def test_arrow_function_string(self):
        assert cleanup_example('<Button onClick="() => {}" />') == "<Button onClick={() => {}} />"

    def test_backtick_array(self):
        assert cleanup_example("<Select items={`[1, 2]`} />") == "<Select items={[1, 2]} />"

    def test_escaped_backticks(self):
        assert cleanup_example("<Code value={``x``} />") == "<Code value={`x`} />"
        assert cleanup_example("<Code value=\\`x\\` />") == "<Code value=`x` />"

    def test_label_identifier(self):
        assert cleanup_example("<Checkbox label={Checked} />") == '<Checkbox label="Checked" />'

    def test_label_expression_untouched(self):
        assert cleanup_example("<Checkbox label={Labels.on} />") == "<Checkbox label={Labels.on} />"


class TestShouldIncludeExample:
    def test_plain_example(self):
        assert should_include_example('<Button variant="primary">Go</Button>', "Button")

    def test_bare_component(self):
        assert not should_include_example("<Button />", "Button")
        assert not should_include_example("<Tooltip/>", "Tooltip")

    def test_too_short(self):
        assert not should_include_example("<A x />", "A")

    def test_undefined_helpers(self):
        assert not should_include_example("<RefreshButton onRefresh={reload} />", "Button")
        assert not should_include_example("<Select items={botList} />", "Select")


class TestExampleSignature:
    def test_sorted_prop_names(self):
        assert example_signature('<Button variant="a" size={2} />') == "size,variant"

    def test_no_props(self):
        assert example_signature("<Button>Go</Button>") == ""


class TestExtractStoryExamples:
    def test_fixture_stories(self):
        assert extract_story_examples(STORIES, "Button") == [
            '<Button variant="primary">Save changes</Button>',
            '<Button size="sm" variant="secondary">Cancel</Button>',
            "<Button loading>Saving</Button>",
        ]

    def test_story_without_args(self):
        source = "export const Custom = { render: () => <Button /> };"
        assert extract_story_examples(source, "Button") == []

    def test_args_that_are_code(self):
        source = "export const Dynamic = { args: { onClick: handle } };"
        assert extract_story_examples(source, "Button") == []
