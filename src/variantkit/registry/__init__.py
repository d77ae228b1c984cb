from variantkit.registry.assembler import (
    BuildResult,
    ComponentSource,
    build_component,
    build_registry,
    build_search_index,
    discover_components,
    load_overrides,
    load_registry,
    write_registry,
)
from variantkit.registry.cache import CACHE_VERSION, CacheEntry, RegistryCache, hash_file
from variantkit.registry.errors import RegistryError
from variantkit.registry.markdown import render_markdown

__all__ = [
    "CACHE_VERSION",
    "BuildResult",
    "CacheEntry",
    "ComponentSource",
    "RegistryCache",
    "RegistryError",
    "build_component",
    "build_registry",
    "build_search_index",
    "discover_components",
    "hash_file",
    "load_overrides",
    "load_registry",
    "render_markdown",
    "write_registry",
]
