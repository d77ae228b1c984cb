"""Build the component registry from a component (and block) source tree.

Layout::

    components/
      button/
        button.tsx
        button.stories.tsx   (optional)
    blocks/
      page-header/
        page-header.tsx

For every discovered component: hash its files, consult the cache, and on
a miss extract metadata from source. Components whose extraction misses
are left out entirely.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from variantkit.config import RegistryConfig
from variantkit.extract import (
    block_files,
    detect_sub_components,
    extract,
    extract_block_dependencies,
    extract_description,
    extract_props_from_interface,
    extract_semantic_colors,
    extract_story_examples,
    to_pascal_case,
)
from variantkit.model import (
    BlockSchema,
    ComponentRegistry,
    ComponentSchema,
    ComponentType,
    PropSchema,
    SearchIndex,
)
from variantkit.registry.cache import CacheEntry, RegistryCache, hash_file
from variantkit.registry.errors import RegistryError
from variantkit.style import unrecognized_tokens
from variantkit.theme import Theme, get_theme

__all__ = [
    "BuildResult",
    "ComponentSource",
    "build_component",
    "build_registry",
    "build_search_index",
    "discover_components",
    "load_overrides",
    "load_registry",
    "write_registry",
]

logger = logging.getLogger(__name__)

_OVERRIDE_FIELDS = {"category": "category", "description": "description", "importPath": "import_path"}


@dataclass(frozen=True)
class ComponentSource:
    """Files that make up one component or block."""

    name: str
    dir_name: str
    root: Path
    source_path: Path
    story_path: Path | None = None
    type: ComponentType = ComponentType.COMPONENT


@dataclass(frozen=True)
class BuildResult:
    registry: ComponentRegistry
    extracted: list[str] = field(default_factory=list)
    cached: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    unrecognized: dict[str, list[str]] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def _discover(root: Path, component_type: ComponentType) -> list[ComponentSource]:
    if not root.is_dir():
        return []
    sources = []
    for directory in sorted(p for p in root.iterdir() if p.is_dir()):
        source_path = directory / f"{directory.name}.tsx"
        if not source_path.is_file():
            continue
        story_path = directory / f"{directory.name}.stories.tsx"
        sources.append(
            ComponentSource(
                name=to_pascal_case(directory.name),
                dir_name=directory.name,
                root=root,
                source_path=source_path,
                story_path=story_path if story_path.is_file() else None,
                type=component_type,
            )
        )
    return sources


def discover_components(components_dir: Path, blocks_dir: Path | None = None) -> list[ComponentSource]:
    """One ComponentSource per ``<dir>/<dir>.tsx``, components first, each sorted by directory."""
    sources = _discover(components_dir, ComponentType.COMPONENT)
    if blocks_dir is not None:
        sources.extend(_discover(blocks_dir, ComponentType.BLOCK))
    return sources


# ---------------------------------------------------------------------------
# Per-component extraction
# ---------------------------------------------------------------------------


def _merge_props(variant_props: dict[str, PropSchema], interface_props: dict[str, PropSchema]) -> dict[str, PropSchema]:
    props = dict(variant_props)
    for name, prop in interface_props.items():
        if name not in props:
            props[name] = prop
        elif prop.description and not props[name].description:
            props[name] = dataclasses.replace(props[name], description=prop.description)
    return props


def build_component(source: ComponentSource, import_path: str, theme: Theme) -> ComponentSchema | None:
    """Extract one component's schema, or None when its source has no variant tables."""
    try:
        text = source.source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", source.source_path, e)
        return None

    extracted = extract(text)
    if extracted is None:
        logger.debug("No variant tables in %s", source.source_path)
        return None

    examples: list[str] = []
    if source.story_path is not None:
        try:
            examples = extract_story_examples(source.story_path.read_text(encoding="utf-8"), source.name)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", source.story_path, e)

    fields: dict[str, Any] = {
        "name": source.name,
        "description": extract_description(text, source.name),
        "props": _merge_props(extracted.props(), extract_props_from_interface(text, f"{source.name}Props")),
        "examples": examples,
        "colors": extract_semantic_colors(text, theme.semantic_names),
        "base_styles": extracted.base_styles,
        "styling": extracted.styling,
        "sub_components": {sub.name: sub for sub in detect_sub_components(text)},
    }
    if source.type is ComponentType.BLOCK:
        return BlockSchema(
            **fields,
            import_path=f"{import_path}/blocks/{source.dir_name}",
            category="Blocks",
            files=block_files(source.root, source.dir_name),
            dependencies=extract_block_dependencies(text),
        )
    return ComponentSchema(**fields, import_path=import_path)


def _unrecognized(schema: ComponentSchema, theme: Theme) -> list[str]:
    class_strings = [schema.base_styles or ""]
    for prop in schema.variant_props.values():
        class_strings.extend(prop.classes.values())
    return sorted({token for classes in class_strings for token in unrecognized_tokens(classes, theme)})


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------


def load_overrides(path: Path | None) -> dict[str, dict[str, Any]]:
    """Read ``{"Button": {"category": "Action", "description": "..."}}``.

    A missing path means no overrides. A file that exists but is not a JSON
    object of objects raises RegistryError.
    """
    if path is None or not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise RegistryError(f"cannot read overrides: {e}", path=str(path)) from e
    if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
        raise RegistryError("overrides must map component names to objects", path=str(path))
    return data


def _apply_overrides(schema: ComponentSchema, override: dict[str, Any] | None) -> ComponentSchema:
    if not override:
        return schema
    changes = {attr: override[key] for key, attr in _OVERRIDE_FIELDS.items() if key in override}
    return dataclasses.replace(schema, **changes) if changes else schema


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def build_search_index(schemas: list[ComponentSchema]) -> SearchIndex:
    by_category: dict[str, list[str]] = {}
    by_type: dict[str, list[str]] = {}
    for schema in schemas:
        by_category.setdefault(schema.category, []).append(schema.name)
        by_type.setdefault(schema.type.value, []).append(schema.name)
    return SearchIndex(
        by_category={k: sorted(v) for k, v in sorted(by_category.items())},
        by_name=sorted(schema.name for schema in schemas),
        by_type={k: sorted(v) for k, v in sorted(by_type.items())},
    )


def build_registry(config: RegistryConfig, theme: Theme | None = None) -> BuildResult:
    """Build the registry for *config*, reading and then rewriting its cache file."""
    theme = theme or get_theme()
    cache = RegistryCache.load(config.cache_path, no_cache=config.no_cache)
    overrides = load_overrides(config.overrides_path)
    sources = discover_components(config.components_dir, config.blocks_dir)

    schemas: list[ComponentSchema] = []
    extracted: list[str] = []
    cached: list[str] = []
    skipped: list[str] = []
    unrecognized: dict[str, list[str]] = {}

    for source in sources:
        source_hash = hash_file(source.source_path)
        story_hash = hash_file(source.story_path) if source.story_path else ""
        schema = cache.get(source.name, source_hash, story_hash)
        if schema is not None:
            cached.append(source.name)
        else:
            schema = build_component(source, config.import_path, theme)
            if schema is None:
                skipped.append(source.name)
                continue
            extracted.append(source.name)
            cache.put(CacheEntry.create_now(source.name, source_hash, story_hash, schema))
            tokens = _unrecognized(schema, theme)
            if tokens:
                logger.info("%s: unrecognized classes %s", source.name, " ".join(tokens))
                unrecognized[source.name] = tokens
        schemas.append(_apply_overrides(schema, overrides.get(source.name)))

    cache.retain({source.name for source in sources})
    try:
        cache.save()
    except OSError as e:
        raise RegistryError(f"cannot write cache: {e}", path=str(cache.path)) from e

    schemas.sort(key=lambda s: s.name)
    registry = ComponentRegistry(
        version=config.version,
        components={s.name: s for s in schemas if not isinstance(s, BlockSchema)},
        blocks={s.name: s for s in schemas if isinstance(s, BlockSchema)},
        search=build_search_index(schemas),
    )
    logger.debug(
        "Registry built: %d extracted, %d cached, %d skipped",
        len(extracted),
        len(cached),
        len(skipped),
    )
    return BuildResult(
        registry=registry,
        extracted=extracted,
        cached=cached,
        skipped=skipped,
        unrecognized=unrecognized,
    )


def write_registry(registry: ComponentRegistry, path: Path) -> None:
    """Write *registry* as deterministic JSON (indent 2, trailing newline)."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(registry.to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise RegistryError(f"cannot write registry: {e}", path=str(path)) from e


def load_registry(path: Path) -> ComponentRegistry:
    """Read a registry document written by :func:`write_registry`."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise RegistryError(f"cannot read registry: {e}", path=str(path)) from e
    if not isinstance(data, dict):
        raise RegistryError("registry must be a JSON object", path=str(path))
    return ComponentRegistry.from_dict(data)
