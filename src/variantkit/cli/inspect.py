"""CLI command: variantkit inspect -- display registry contents."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from variantkit.model import ComponentRegistry, ComponentSchema, PropSchema
from variantkit.registry import RegistryError, load_registry


def _prop_line(name: str, prop: PropSchema) -> str:
    parts = [f"  {name}: {prop.type}"]
    if prop.required:
        parts.append("(required)")
    if prop.default is not None:
        parts.append(f"default={prop.default}")
    if prop.values:
        parts.append(f"[{', '.join(prop.values)}]")
    return "  ".join(parts)


def _show_summary(registry: ComponentRegistry) -> None:
    click.echo(f"Version:    {registry.version}")
    click.echo(f"Components: {len(registry.components)}")
    click.echo(f"Blocks:     {len(registry.blocks)}")
    click.echo()
    click.echo("By category:")
    for category, names in sorted(registry.search.by_category.items()):
        click.echo(f"  {category}: {', '.join(names)}")


def _show_component(schema: ComponentSchema) -> None:
    click.echo(f"{schema.name} ({schema.type.value})")
    if schema.description:
        click.echo(f"  {schema.description}")
    click.echo(f"Import:   {schema.import_path}")
    click.echo(f"Category: {schema.category}")
    if schema.base_styles:
        click.echo(f"Base:     {schema.base_styles}")
    click.echo()

    click.echo("Props:")
    for name, prop in schema.props.items():
        click.echo(_prop_line(name, prop))
        for value, classes in prop.classes.items():
            click.echo(f"      {value}: {classes}")

    if schema.sub_components:
        click.echo()
        click.echo("Sub-components:")
        for sub in schema.sub_components.values():
            suffix = " (pass-through)" if sub.is_pass_through else ""
            click.echo(f"  {schema.name}.{sub.name}{suffix}")

    if schema.colors:
        click.echo()
        click.echo(f"Colors: {' '.join(schema.colors)}")
    click.echo(f"Examples: {len(schema.examples)}")


@click.command()
@click.argument("registry_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("name", required=False)
def inspect(registry_file: str, name: str | None) -> None:
    """Summarize a registry, or show one component in detail."""
    try:
        registry = load_registry(Path(registry_file))
    except RegistryError as exc:
        click.echo(f"Registry error: {exc}", err=True)
        sys.exit(1)

    if name is None:
        _show_summary(registry)
        return

    schema = registry.get(name)
    if schema is None:
        click.echo(f"Unknown component: {name}", err=True)
        sys.exit(1)
    _show_component(schema)
