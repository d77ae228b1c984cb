"""Tests for registry assembly over a fixture component tree."""

import json
import shutil
from pathlib import Path

import pytest

from variantkit.config import RegistryConfig
from variantkit.model import BlockSchema, ComponentType
from variantkit.registry import (
    RegistryError,
    build_registry,
    discover_components,
    load_overrides,
    load_registry,
    write_registry,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def tree(tmp_path: Path) -> Path:
    """A writable copy of the fixture components and blocks."""
    shutil.copytree(FIXTURES / "components", tmp_path / "components")
    shutil.copytree(FIXTURES / "blocks", tmp_path / "blocks")
    return tmp_path


def _config(tree: Path, **overrides) -> RegistryConfig:
    values = {
        "components_dir": tree / "components",
        "blocks_dir": tree / "blocks",
        "output_path": tree / "registry.json",
        "cache_path": tree / ".cache" / "registry-cache.json",
        "version": "1.2.3",
    }
    values.update(overrides)
    return RegistryConfig(**values)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class TestDiscoverComponents:
    def test_components_then_blocks(self, tree):
        sources = discover_components(tree / "components", tree / "blocks")
        assert [s.name for s in sources] == ["Button", "Dialog", "Spinner", "Tabs", "PageHeader"]
        assert sources[-1].type is ComponentType.BLOCK

    def test_story_paths(self, tree):
        sources = {s.name: s for s in discover_components(tree / "components")}
        assert sources["Button"].story_path == tree / "components" / "button" / "button.stories.tsx"
        assert sources["Dialog"].story_path is None

    def test_directory_without_main_file(self, tree):
        (tree / "components" / "utils").mkdir()
        (tree / "components" / "utils" / "cn.ts").write_text("export const cn = () => '';")
        names = [s.name for s in discover_components(tree / "components")]
        assert "Utils" not in names

    def test_missing_directory(self, tmp_path):
        assert discover_components(tmp_path / "nope", tmp_path / "nope-either") == []


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------


class TestBuildRegistry:
    def test_counts(self, tree):
        result = build_registry(_config(tree))
        assert result.extracted == ["Button", "Dialog", "Tabs", "PageHeader"]
        assert result.cached == []
        assert result.skipped == ["Spinner"]
        assert result.unrecognized == {}

    def test_registry_contents(self, tree):
        registry = build_registry(_config(tree)).registry
        assert registry.version == "1.2.3"
        assert list(registry.components) == ["Button", "Dialog", "Tabs"]
        assert list(registry.blocks) == ["PageHeader"]

    def test_button_schema(self, tree):
        button = build_registry(_config(tree)).registry.components["Button"]
        assert button.description == "Buttons trigger an action or event."
        assert button.import_path == "@cloudflare/kumo"
        assert button.base_styles == "inline-flex items-center font-medium"
        assert list(button.props) == ["size", "variant", "children", "loading"]
        assert button.props["variant"].default == "secondary"
        assert button.props["variant"].values == ["primary", "secondary", "secondary-destructive"]
        assert len(button.examples) == 3
        assert "bg-kumo-brand" in button.colors

    def test_compound_component(self, tree):
        dialog = build_registry(_config(tree)).registry.components["Dialog"]
        assert list(dialog.sub_components) == ["Root", "Trigger", "Title"]

    def test_block_schema(self, tree):
        block = build_registry(_config(tree)).registry.blocks["PageHeader"]
        assert isinstance(block, BlockSchema)
        assert block.type is ComponentType.BLOCK
        assert block.category == "Blocks"
        assert block.import_path == "@cloudflare/kumo/blocks/page-header"
        assert block.files == ["page-header/page-header.tsx", "page-header/page-header.stories.tsx"]
        assert block.dependencies == ["Button", "Tabs"]

    def test_search_index(self, tree):
        search = build_registry(_config(tree)).registry.search
        assert search.by_name == ["Button", "Dialog", "PageHeader", "Tabs"]
        assert search.by_type == {"block": ["PageHeader"], "component": ["Button", "Dialog", "Tabs"]}
        assert search.by_category == {"Blocks": ["PageHeader"], "Other": ["Button", "Dialog", "Tabs"]}

    def test_unrecognized_tokens_reported(self, tree):
        card = tree / "components" / "card"
        card.mkdir()
        (card / "card.tsx").write_text(
            'export const KUMO_CARD_VARIANTS = { tone: { loud: { classes: "bg-not-a-color px-2 sm:px-4" } } };\n'
            'export const KUMO_CARD_DEFAULT_VARIANTS = { tone: "loud" };\n'
        )
        result = build_registry(_config(tree))
        assert result.unrecognized == {"Card": ["bg-not-a-color"]}


# ---------------------------------------------------------------------------
# Incremental rebuilds
# ---------------------------------------------------------------------------


class TestIncrementalBuild:
    def test_second_build_uses_cache(self, tree):
        config = _config(tree)
        build_registry(config)
        second = build_registry(config)
        assert second.extracted == []
        assert second.cached == ["Button", "Dialog", "Tabs", "PageHeader"]
        assert second.skipped == ["Spinner"]

    def test_unchanged_files_give_identical_output(self, tree):
        config = _config(tree)
        first_path = tree / "first.json"
        write_registry(build_registry(config).registry, first_path)
        write_registry(build_registry(config).registry, config.output_path)
        assert first_path.read_bytes() == config.output_path.read_bytes()

    def test_changed_source_is_re_extracted(self, tree):
        config = _config(tree)
        build_registry(config)
        before = json.loads(config.cache_path.read_text())["entries"]

        dialog = tree / "components" / "dialog" / "dialog.tsx"
        dialog.write_text(dialog.read_text().replace("Narrow dialog", "Small dialog"))
        result = build_registry(config)

        assert result.extracted == ["Dialog"]
        assert result.registry.components["Dialog"].props["size"].descriptions["sm"] == "Small dialog"
        after = json.loads(config.cache_path.read_text())["entries"]
        for name in ("Button", "Tabs", "PageHeader"):
            assert after[name] == before[name]

    def test_changed_story_is_re_extracted(self, tree):
        config = _config(tree)
        build_registry(config)
        stories = tree / "components" / "button" / "button.stories.tsx"
        stories.write_text(stories.read_text() + "\n// touched\n")
        assert build_registry(config).extracted == ["Button"]

    def test_no_cache_extracts_everything(self, tree):
        build_registry(_config(tree))
        result = build_registry(_config(tree, no_cache=True))
        assert result.extracted == ["Button", "Dialog", "Tabs", "PageHeader"]

    def test_removed_component_leaves_cache(self, tree):
        config = _config(tree)
        build_registry(config)
        shutil.rmtree(tree / "components" / "tabs")
        build_registry(config)
        entries = json.loads(config.cache_path.read_text())["entries"]
        assert "Tabs" not in entries


# ---------------------------------------------------------------------------
# Overrides and I/O
# ---------------------------------------------------------------------------


class TestOverrides:
    def test_category_and_description(self, tree):
        path = tree / "overrides.json"
        path.write_text(json.dumps({"Button": {"category": "Action", "description": "Clickable."}}))
        registry = build_registry(_config(tree, overrides_path=path)).registry
        assert registry.components["Button"].category == "Action"
        assert registry.components["Button"].description == "Clickable."
        assert registry.search.by_category["Action"] == ["Button"]

    def test_overrides_apply_to_cached_components(self, tree):
        path = tree / "overrides.json"
        build_registry(_config(tree))
        path.write_text(json.dumps({"Tabs": {"category": "Navigation"}}))
        result = build_registry(_config(tree, overrides_path=path))
        assert "Tabs" in result.cached
        assert result.registry.components["Tabs"].category == "Navigation"

    def test_missing_file(self, tmp_path):
        assert load_overrides(tmp_path / "none.json") == {}
        assert load_overrides(None) == {}

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "overrides.json"
        path.write_text('["Button"]')
        with pytest.raises(RegistryError):
            load_overrides(path)


class TestWriteRegistry:
    def test_format(self, tree):
        config = _config(tree)
        write_registry(build_registry(config).registry, config.output_path)
        text = config.output_path.read_text()
        assert text.endswith("}\n")
        assert text.startswith('{\n  "version": "1.2.3",')

    def test_load_round_trip(self, tree):
        config = _config(tree)
        registry = build_registry(config).registry
        write_registry(registry, config.output_path)
        assert load_registry(config.output_path) == registry

    def test_load_invalid(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text("nope")
        with pytest.raises(RegistryError):
            load_registry(path)

    def test_unwritable_path(self, tree):
        (tree / "blocker").write_text("")
        registry = build_registry(_config(tree)).registry
        with pytest.raises(RegistryError) as exc_info:
            write_registry(registry, tree / "blocker" / "registry.json")
        assert "cannot write registry" in str(exc_info.value)

    def test_unwritable_cache(self, tree):
        (tree / "blocker").write_text("")
        with pytest.raises(RegistryError) as exc_info:
            build_registry(_config(tree, cache_path=tree / "blocker" / "cache.json"))
        assert "cannot write cache" in str(exc_info.value)
