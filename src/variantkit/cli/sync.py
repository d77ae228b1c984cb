"""CLI command: variantkit sync -- replace the design file's variables with the theme's tokens."""

from __future__ import annotations

import sys

import click

from variantkit.cli._remote import describe_error, remote_config, remote_options
from variantkit.remote import (
    COLOR_COLLECTION,
    TYPOGRAPHY_COLLECTION,
    TYPOGRAPHY_MODE,
    RemoteError,
    VariablePlan,
    VariablesClient,
    build_plan,
)
from variantkit.theme import ThemeError, get_theme

PREVIEW_LIMIT = 10


def _preview(plan: VariablePlan) -> None:
    click.echo(f"Color tokens: {len(plan.colors)}")
    for variable in plan.colors[:PREVIEW_LIMIT]:
        click.echo(f"   - {variable.name}")
    if len(plan.colors) > PREVIEW_LIMIT:
        click.echo(f"   ... and {len(plan.colors) - PREVIEW_LIMIT} more")

    click.echo(f"Typography tokens: {len(plan.typography)}")
    for token in plan.typography[:PREVIEW_LIMIT]:
        click.echo(f"   - {token.name}: {token.value}")
    if len(plan.typography) > PREVIEW_LIMIT:
        click.echo(f"   ... and {len(plan.typography) - PREVIEW_LIMIT} more")

    for extension in plan.extensions:
        click.echo(f"Extension {extension.name}: {len(extension.overrides)} override(s)")


@click.command()
@remote_options
@click.option("--dry-run", is_flag=True, help="Show what would be synced without calling the API")
def sync(token: str | None, file_key: str | None, timeout: float, dry_run: bool) -> None:
    """Purge the file's variables and recreate them from the theme.

    The theme is the single source of truth: every existing variable and
    collection in the file is deleted first.
    """
    try:
        plan = build_plan(get_theme())
    except ThemeError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    _preview(plan)
    if plan.total == 0:
        click.echo("No tokens found to sync.")
        return
    if dry_run:
        return

    config = remote_config(token, file_key, timeout)
    click.echo(f"\nSyncing to file {file_key} (existing variables are purged)...")
    try:
        with VariablesClient(config) as client:
            result = client.sync(plan)
            try:
                local = client.get_local_variables()
            except RemoteError as exc:
                local = None
                click.echo(f"Could not verify sync: {describe_error(exc)}", err=True)
    except RemoteError as exc:
        click.echo(describe_error(exc), err=True)
        sys.exit(1)

    click.echo(f"Purged {result.purged_variables} variable(s), {result.purged_collections} collection(s)")
    click.echo(f"Synced {result.created_variables} token(s)")
    click.echo(f'   Collection: "{COLOR_COLLECTION}" (Light, Dark) - {len(plan.colors)} color tokens')
    click.echo(f'   Collection: "{TYPOGRAPHY_COLLECTION}" ({TYPOGRAPHY_MODE}) - {len(plan.typography)} typography tokens')
    if plan.extensions:
        click.echo(f"   Extensions: {', '.join(e.name for e in plan.extensions)} (Light, Dark each)")
    if result.temp_id_to_real_id:
        click.echo(f"   Created {len(result.temp_id_to_real_id)} new ids")
    if local is not None:
        click.echo(f"Verified: {len(local.collections)} collection(s), {len(local.variables)} variable(s) in file")
