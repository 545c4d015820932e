"""stylescope CLI entry point: Click group with subcommands."""

import logging

import click

from stylescope import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylescope")
@click.option("-v", "--verbose", is_flag=True, help="Log tracker activity to stderr.")
def cli(verbose: bool) -> None:
    """stylescope - find where a page's stylesheets use a CSS property."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylescope.cli.checks import checks  # noqa: E402
from stylescope.cli.inspect import inspect  # noqa: E402
from stylescope.cli.scan import scan  # noqa: E402

cli.add_command(checks)
cli.add_command(inspect)
cli.add_command(scan)
