"""CLI command: variantkit fetch -- list the variables currently in a design file."""

from __future__ import annotations

import sys

import click

from variantkit.cli._remote import describe_error, remote_config, remote_options
from variantkit.remote import RemoteError, VariablesClient

PREVIEW_LIMIT = 10


@click.command()
@remote_options
@click.option("--collection", default=None, help="Only show the collection with this name")
def fetch(token: str | None, file_key: str | None, timeout: float, collection: str | None) -> None:
    """Fetch and display the file's variable collections."""
    config = remote_config(token, file_key, timeout)
    click.echo(f"Fetching variables from file: {file_key}...")

    try:
        with VariablesClient(config) as client:
            local = client.get_local_variables()
    except RemoteError as exc:
        click.echo(describe_error(exc), err=True)
        sys.exit(1)

    if local.is_empty():
        click.echo("No variables found in file.")
        return

    click.echo(f"\nCollections ({len(local.collections)}):")
    for collection_id, remote in local.collections.items():
        if collection and remote.name != collection:
            continue
        variables = local.in_collection(collection_id)
        click.echo(f"\n  {remote.name} ({collection_id})")
        click.echo(f"    Modes: {', '.join(remote.modes)}")
        click.echo(f"    Variables ({len(variables)}):")
        for variable in variables[:PREVIEW_LIMIT]:
            click.echo(f"      - {variable.name}")
        if len(variables) > PREVIEW_LIMIT:
            click.echo(f"      ... and {len(variables) - PREVIEW_LIMIT} more")
