"""CLI command: variantkit build -- extract metadata and write the component registry."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from variantkit.config import RegistryConfig
from variantkit.registry import RegistryError, build_registry, render_markdown, write_registry
from variantkit.theme import ThemeError


@click.command()
@click.option(
    "--components-dir",
    type=click.Path(file_okay=False),
    default="src/components",
    show_default=True,
    help="One sub-directory per component",
)
@click.option("--blocks-dir", type=click.Path(file_okay=False), default=None, help="One sub-directory per block")
@click.option("--output", default="ai/component-registry.json", show_default=True, help="Registry JSON path")
@click.option(
    "--cache",
    "cache_path",
    default=".cache/component-registry-cache.json",
    show_default=True,
    help="Incremental cache path",
)
@click.option("--markdown", "markdown_path", default=None, help="Also write the markdown reference here")
@click.option(
    "--overrides",
    "overrides_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file of per-component category/description overrides",
)
@click.option("--import-path", default="@cloudflare/kumo", show_default=True, help="Package components import from")
@click.option("--registry-version", default="0.0.0", show_default=True, help="Version stamped into the registry")
@click.option("--no-cache", is_flag=True, help="Re-extract every component")
def build(
    components_dir: str,
    blocks_dir: str | None,
    output: str,
    cache_path: str,
    markdown_path: str | None,
    overrides_path: str | None,
    import_path: str,
    registry_version: str,
    no_cache: bool,
) -> None:
    """Build the component registry from component sources.

    Unchanged components are served from the cache. Components without a
    variants table are skipped.
    """
    config = RegistryConfig(
        components_dir=Path(components_dir),
        blocks_dir=Path(blocks_dir) if blocks_dir else None,
        output_path=Path(output),
        cache_path=Path(cache_path),
        markdown_path=Path(markdown_path) if markdown_path else None,
        overrides_path=Path(overrides_path) if overrides_path else None,
        import_path=import_path,
        version=registry_version,
        no_cache=no_cache,
    )

    try:
        result = build_registry(config)
    except ThemeError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)
    except RegistryError as exc:
        click.echo(f"Registry error: {exc}", err=True)
        sys.exit(1)

    registry = result.registry
    try:
        write_registry(registry, config.output_path)
        if config.markdown_path:
            config.markdown_path.parent.mkdir(parents=True, exist_ok=True)
            config.markdown_path.write_text(render_markdown(registry), encoding="utf-8")
    except RegistryError as exc:
        click.echo(f"Registry error: {exc}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"Registry error: cannot write markdown: {exc}", err=True)
        sys.exit(1)
    click.echo(
        f"Registry: {len(registry.components)} component(s), {len(registry.blocks)} block(s) -> {config.output_path}"
    )
    if config.markdown_path:
        click.echo(f"Markdown: {config.markdown_path}")

    click.echo(f"Extracted: {len(result.extracted)}, cached: {len(result.cached)}, skipped: {len(result.skipped)}")
    if result.skipped:
        click.echo(f"Skipped (no variants table): {', '.join(result.skipped)}")
    for name, tokens in result.unrecognized.items():
        click.echo(f"  {name}: unrecognized {' '.join(tokens)}", err=True)
