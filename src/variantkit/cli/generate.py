"""CLI command: variantkit generate -- write variant grid plans for a design-tool plugin."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from variantkit.generator import RecordingSurface
from variantkit.generator import generate as generate_grid
from variantkit.model import ComponentSchema
from variantkit.registry import RegistryError, load_registry
from variantkit.theme import ThemeError, get_theme


def _axis(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [name.strip() for name in value.split(",") if name.strip()]


@click.command()
@click.argument("registry_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("names", nargs=-1)
@click.option("--out-dir", default="variant-plans", show_default=True, help="Directory for <Name>.json plans")
@click.option("--state", "states", multiple=True, help="Add a state column value (repeatable)")
@click.option("--rows", default=None, help="Comma-separated dimensions to put on rows")
@click.option("--columns", default=None, help="Comma-separated dimensions to put on columns")
def generate(
    registry_file: str,
    names: tuple[str, ...],
    out_dir: str,
    states: tuple[str, ...],
    rows: str | None,
    columns: str | None,
) -> None:
    """Lay out every variant combination of the named components.

    Without NAMES, every component with at least one variant dimension is
    generated, and components lacking a dimension named by --rows or
    --columns are skipped with a warning. Each plan holds the grid layout
    and the recorded drawing operations.
    """
    try:
        registry = load_registry(Path(registry_file))
        theme = get_theme()
    except RegistryError as exc:
        click.echo(f"Registry error: {exc}", err=True)
        sys.exit(1)
    except ThemeError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    schemas: list[ComponentSchema] = []
    if names:
        for name in names:
            schema = registry.get(name)
            if schema is None:
                click.echo(f"Unknown component: {name}", err=True)
                sys.exit(1)
            schemas.append(schema)
    else:
        schemas = [s for s in registry.components.values() if s.variant_props]

    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    for schema in schemas:
        surface = RecordingSurface()
        try:
            grid = generate_grid(
                schema,
                surface,
                states=list(states) or None,
                rows=_axis(rows),
                columns=_axis(columns),
                theme=theme,
            )
        except ValueError as exc:
            if names:
                click.echo(f"{schema.name}: {exc}", err=True)
                sys.exit(1)
            click.echo(f"Skipping {schema.name}: {exc}", err=True)
            continue
        plan = {"grid": grid.to_dict(), **surface.to_dict()}
        target = out_path / f"{schema.name}.json"
        target.write_text(json.dumps(plan, indent=2) + "\n", encoding="utf-8")
        click.echo(f"{schema.name}: {len(grid.cells)} variant(s) -> {target}")
