"""CLI command: stylescope checks -- list the named property checks."""

from __future__ import annotations

import click

from stylescope.checks import CHECKS


@click.command()
def checks() -> None:
    """List the named checks accepted by --check."""
    for check in CHECKS.values():
        query = check.property_name or "*"
        if check.property_value:
            query += f": {check.property_value}*"
        click.echo(f"{check.id:<20} {query:<20} {check.title}")
