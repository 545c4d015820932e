"""Helpers shared by the query subcommands."""

from __future__ import annotations

import json

import click

from stylescope.checks import CHECKS, Usage

query_options = [
    click.option("--check", "check_id", default=None, help="Run a named check (see `stylescope checks`)."),
    click.option("--property", "property_name", default=None, help="Property name to match exactly."),
    click.option("--value", "property_value", default=None, help="Value prefix to match."),
    click.option("--json", "as_json", is_flag=True, help="Print matches as JSON."),
]


def with_query_options(func):
    for option in reversed(query_options):
        func = option(func)
    return func


def resolve_query(
    check_id: str | None, property_name: str | None, property_value: str | None
) -> tuple[str | None, str | None]:
    """Turn ``--check`` or ``--property/--value`` into a (name, value) query."""
    if check_id and (property_name or property_value):
        raise click.UsageError("Use either --check or --property/--value, not both.")
    if check_id:
        check = CHECKS.get(check_id)
        if check is None:
            raise click.BadParameter(
                f"unknown check {check_id!r} (available: {', '.join(sorted(CHECKS))})",
                param_hint="--check",
            )
        return check.property_name, check.property_value
    if not property_name and not property_value:
        raise click.UsageError("Nothing to look for: pass --check, --property or --value.")
    return property_name, property_value


def echo_usages(usages: list[Usage], as_json: bool) -> None:
    if as_json:
        rows = [
            {
                "url": u.url,
                "selector": u.declaration.selector,
                "property": u.declaration.property.name,
                "value": u.declaration.property.value,
                "line": u.declaration.range.start_line,
                "column": u.declaration.range.start_column,
                "excerpt": u.excerpt,
            }
            for u in usages
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    if not usages:
        click.echo("No matching declarations.")
        return
    for usage in usages:
        click.echo(usage.url or "(inline)")
        click.echo(usage.excerpt)
        click.echo()
    click.echo(f"{len(usages)} matching declaration(s)")
