"""CLI command: stylescope scan -- collect a live page's styles and query them."""

from __future__ import annotations

import asyncio
import sys

import click
from playwright.async_api import Error as PlaywrightError

from stylescope.checks import find_usages
from stylescope.cli.common import echo_usages, resolve_query, with_query_options
from stylescope.config import ScanConfig
from stylescope.errors import StyleScopeError
from stylescope.gatherer import STYLES_UNAVAILABLE


@click.command()
@click.argument("url")
@with_query_options
@click.option("--headed", is_flag=True, help="Show the browser window.")
@click.option(
    "--wait-until",
    type=click.Choice(["load", "domcontentloaded", "networkidle"]),
    default="load",
    help="Navigation event to wait for.",
)
@click.option("--settle-ms", default=1000, type=int, help="Extra time for late stylesheets.")
def scan(
    url: str,
    check_id: str | None,
    property_name: str | None,
    property_value: str | None,
    as_json: bool,
    headed: bool,
    wait_until: str,
    settle_ms: int,
) -> None:
    """Load URL in Chromium and find matching declarations in its stylesheets."""
    from stylescope.scan import scan_page

    name, value = resolve_query(check_id, property_name, property_value)
    config = ScanConfig(headless=not headed, wait_until=wait_until, settle_ms=settle_ms)

    try:
        styles = asyncio.run(scan_page(url, config))
    except (PlaywrightError, StyleScopeError) as exc:
        click.echo(f"Scan of {url} failed: {exc}", err=True)
        sys.exit(1)

    if styles is STYLES_UNAVAILABLE:
        click.echo(f"No stylesheets were collected from {url}", err=True)
        sys.exit(1)

    click.echo(f"Collected {len(styles)} unique stylesheet(s)", err=True)
    echo_usages(find_usages(styles, name, value), as_json)
