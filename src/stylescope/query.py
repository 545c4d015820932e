"""Declaration queries over collected stylesheets."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from stylescope.model.stylesheet import Declaration, StyleSheetRecord

__all__ = ["filter_by_property", "declaration_matches"]


def declaration_matches(
    declaration: Declaration, name: str | None = None, value: str | None = None
) -> bool:
    """Return True if *declaration* uses property *name* and a value starting with *value*.

    Omitted criteria are not checked; with neither given nothing matches.
    """
    if not name and not value:
        return False
    if name and declaration.property.name != name:
        return False
    if value and not declaration.property.value.startswith(value):
        return False
    return True


def filter_by_property(
    stylesheets: Iterable[StyleSheetRecord],
    name: str | None = None,
    value: str | None = None,
) -> list[StyleSheetRecord]:
    """Return the stylesheets that use a property, narrowed to matching declarations.

    Each returned record is a copy of its input carrying only the matching
    declarations; stylesheets without a match are left out. Input order is
    kept, both across stylesheets and within each one.
    """
    if not name and not value:
        return []

    results: list[StyleSheetRecord] = []
    for sheet in stylesheets:
        matches = tuple(d for d in sheet.declarations if declaration_matches(d, name, value))
        if matches:
            results.append(replace(sheet, declarations=matches))
    return results
