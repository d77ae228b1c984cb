"""CLI command: variantkit resolve -- print the style descriptor for a class string."""

from __future__ import annotations

import json
import sys

import click

from variantkit.style import resolve as resolve_classes
from variantkit.style import unrecognized_tokens
from variantkit.theme import ThemeError, get_theme


@click.command()
@click.argument("classes", nargs=-1, required=True)
@click.option("--state", default=None, help="Apply one state bucket on top of the base properties")
@click.option("--strict", is_flag=True, help="Exit 1 when any class matches no rule")
def resolve(classes: tuple[str, ...], state: str | None, strict: bool) -> None:
    """Resolve utility CLASSES and print the descriptor as JSON.

    Arguments are joined with spaces, so quoting the class string is optional.
    """
    class_string = " ".join(classes)
    try:
        theme = get_theme()
    except ThemeError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    style = resolve_classes(class_string, theme)
    if state:
        style = style.with_state(state)
    click.echo(json.dumps(style.to_dict(), indent=2))

    unknown = unrecognized_tokens(class_string, theme)
    if unknown:
        click.echo(f"Unrecognized: {' '.join(unknown)}", err=True)
        if strict:
            sys.exit(1)
