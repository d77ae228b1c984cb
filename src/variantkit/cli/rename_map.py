"""CLI command: variantkit rename-map -- show or apply planned token renames."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from variantkit.theme import ThemeError, get_theme, migrate_content, token_rename_map

SOURCE_SUFFIXES = {".ts", ".tsx", ".js", ".jsx", ".css", ".md", ".mdx", ".astro"}


def _source_files(paths: tuple[str, ...]) -> list[Path]:
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.is_file() and p.suffix in SOURCE_SUFFIXES))
        else:
            files.append(path)
    return files


@click.command("rename-map")
@click.option(
    "--apply",
    "apply_paths",
    multiple=True,
    type=click.Path(exists=True),
    help="Rewrite renamed classes in these files or directories (repeatable)",
)
@click.option("--dry-run", is_flag=True, help="With --apply, report changes without writing")
@click.option("--json", "as_json", is_flag=True, help="Print the rename map as JSON")
def rename_map(apply_paths: tuple[str, ...], dry_run: bool, as_json: bool) -> None:
    """Print old -> new utility names for tokens with a planned rename."""
    try:
        renames = token_rename_map(get_theme())
    except ThemeError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    if not apply_paths:
        if as_json:
            click.echo(json.dumps(renames.to_dict(), indent=2))
            return
        if not renames:
            click.echo("No renames planned.")
            return
        for table, mapping in renames.to_dict().items():
            if mapping:
                click.echo(f"{table}:")
                for old, new in mapping.items():
                    click.echo(f"  {old} -> {new}")
        return

    changed_files = 0
    for path in _source_files(apply_paths):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            click.echo(f"Skipping {path}: {exc}", err=True)
            continue
        updated, changes = migrate_content(content, renames)
        if not changes:
            continue
        changed_files += 1
        click.echo(f"{path}:")
        for change in changes:
            click.echo(f"  {change.line}: {change.before}")
            click.echo(f"  {' ' * len(str(change.line))}  {change.after}")
        if not dry_run:
            path.write_text(updated, encoding="utf-8")

    verb = "Would update" if dry_run else "Updated"
    click.echo(f"{verb} {changed_files} file(s)")
