"""Options and error reporting shared by the sync and fetch commands."""

from __future__ import annotations

from typing import Any, Callable

import click

from variantkit.config import RemoteConfig
from variantkit.remote import RemoteAPIError, RemoteError

TOKEN_ENV_VAR = "FIGMA_TOKEN"
FILE_KEY_ENV_VAR = "FIGMA_FILE_KEY"


def remote_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Add --token, --file-key and --timeout to a command."""
    fn = click.option("--timeout", default=30.0, show_default=True, help="Request timeout in seconds")(fn)
    fn = click.option(
        "--file-key",
        envvar=FILE_KEY_ENV_VAR,
        default=None,
        help=f"Target design file key [env: {FILE_KEY_ENV_VAR}]",
    )(fn)
    fn = click.option(
        "--token",
        envvar=TOKEN_ENV_VAR,
        default=None,
        help=f"Personal access token [env: {TOKEN_ENV_VAR}]",
    )(fn)
    return fn


def describe_error(exc: RemoteError) -> str:
    """``AccessDeniedError (403): Invalid scope`` style one-liner."""
    name = type(exc).__name__
    if isinstance(exc, RemoteAPIError) and exc.status_code is not None:
        return f"{name} ({exc.status_code}): {exc.message}"
    return f"{name}: {exc.message}"


def remote_config(token: str | None, file_key: str | None, timeout: float) -> RemoteConfig:
    if not token:
        raise click.UsageError(f"Missing --token (or {TOKEN_ENV_VAR})")
    if not file_key:
        raise click.UsageError(f"Missing --file-key (or {FILE_KEY_ENV_VAR})")
    return RemoteConfig(token=token, file_key=file_key, timeout=timeout)
