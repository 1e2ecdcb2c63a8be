"""StyleScale CLI entry point: Click group with subcommands."""

import logging

import click

from stylescale import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylescale")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details.")
def cli(verbose: bool) -> None:
    """StyleScale - theme-driven class names for UI elements."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylescale.cli.resolve import resolve  # noqa: E402
from stylescale.cli.validate import validate  # noqa: E402

cli.add_command(validate)
cli.add_command(resolve)
