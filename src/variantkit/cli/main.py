"""variantkit CLI entry point: Click group with subcommands."""

import logging

import click

from variantkit import __version__
from variantkit.theme import THEME_ENV_VAR, configure_theme


@click.group()
@click.version_option(version=__version__, prog_name="variantkit")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.option(
    "--theme",
    "theme_path",
    type=click.Path(exists=True, dir_okay=False),
    envvar=THEME_ENV_VAR,
    default=None,
    help="Theme file (defaults to the bundled theme)",
)
def cli(verbose: bool, theme_path: str | None) -> None:
    """variantkit - component registry builder and design-tool variant generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if theme_path:
        configure_theme(theme_path)


# Import and register subcommands
from variantkit.cli.build import build  # noqa: E402
from variantkit.cli.fetch import fetch  # noqa: E402
from variantkit.cli.generate import generate  # noqa: E402
from variantkit.cli.inspect import inspect  # noqa: E402
from variantkit.cli.rename_map import rename_map  # noqa: E402
from variantkit.cli.resolve import resolve  # noqa: E402
from variantkit.cli.sync import sync  # noqa: E402

cli.add_command(build)
cli.add_command(inspect)
cli.add_command(resolve)
cli.add_command(generate)
cli.add_command(sync)
cli.add_command(fetch)
cli.add_command(rename_map)
