"""Property usage checks built on the query engine and excerpt extractor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from stylescope.excerpt import format_declaration
from stylescope.model.stylesheet import Declaration, StyleSheetRecord
from stylescope.query import filter_by_property


@dataclass(frozen=True)
class PropertyCheck:
    """A named property/value query."""

    id: str
    title: str
    property_name: str | None = None
    property_value: str | None = None  # prefix


@dataclass(frozen=True)
class Usage:
    """One declaration matched by a query, as it appears in a report."""

    url: str
    excerpt: str
    declaration: Declaration


CHECKS: dict[str, PropertyCheck] = {
    check.id: check
    for check in (
        PropertyCheck(
            id="uses-new-flexbox",
            title="Uses the deprecated display: box flexbox",
            property_name="display",
            property_value="box",
        ),
        PropertyCheck(
            id="uses-will-change",
            title="Uses the will-change property",
            property_name="will-change",
        ),
    )
}


def find_usages(
    stylesheets: Iterable[StyleSheetRecord] | None,
    name: str | None = None,
    value: str | None = None,
) -> list[Usage]:
    """Return a report row for every declaration matching *name* / *value*.

    Unavailable styles (``None`` or the gatherer's sentinel) yield no rows.
    """
    if not stylesheets:
        return []
    usages: list[Usage] = []
    for sheet in filter_by_property(stylesheets, name, value):
        for declaration in sheet.declarations:
            usages.append(
                Usage(
                    url=sheet.source_url,
                    excerpt=format_declaration(declaration, sheet.content),
                    declaration=declaration,
                )
            )
    return usages


def run_check(
    stylesheets: Iterable[StyleSheetRecord] | None, check: PropertyCheck
) -> list[Usage]:
    return find_usages(stylesheets, check.property_name, check.property_value)
