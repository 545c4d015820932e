"""CLI command: stylescope inspect -- query a single stylesheet file or URL."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import httpx

from stylescope.checks import find_usages
from stylescope.cli.common import echo_usages, resolve_query, with_query_options
from stylescope.config import ScanConfig
from stylescope.model.stylesheet import StyleSheetOrigin, StyleSheetRecord
from stylescope.parser import parse_declarations


def _load(source: str, timeout: float) -> str:
    if source.startswith(("http://", "https://")):
        response = httpx.get(source, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.text
    return Path(source).read_bytes().decode("utf-8", errors="replace")


@click.command()
@click.argument("source")
@with_query_options
def inspect(
    source: str,
    check_id: str | None,
    property_name: str | None,
    property_value: str | None,
    as_json: bool,
) -> None:
    """Find matching declarations in a CSS file or stylesheet URL."""
    name, value = resolve_query(check_id, property_name, property_value)

    try:
        content = _load(source, ScanConfig().http_timeout_s)
    except (OSError, httpx.HTTPError) as exc:
        click.echo(f"Could not read {source}: {exc}", err=True)
        sys.exit(1)

    sheet = StyleSheetRecord(
        id=source,
        origin=StyleSheetOrigin.REGULAR,
        source_url=source,
        content=content,
        declarations=parse_declarations(content),
    )
    echo_usages(find_usages([sheet], name, value), as_json)
