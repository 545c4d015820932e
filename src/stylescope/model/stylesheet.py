"""Stylesheet model: headers, declarations, source ranges and records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StyleSheetOrigin(Enum):
    """Where a stylesheet came from, as reported by the browser."""

    REGULAR = "regular"
    INJECTED = "injected"
    USER_AGENT = "user-agent"
    INSPECTOR = "inspector"

    @classmethod
    def parse(cls, raw: str) -> StyleSheetOrigin | None:
        """Return the origin named by *raw*, or None if it is unknown."""
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True)
class SourceRange:
    """A span of source text.

    Lines are zero-based. Columns are character offsets within their line,
    and ``end_column`` is exclusive.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line


@dataclass(frozen=True)
class CSSProperty:
    """A trimmed ``name: value`` pair."""

    name: str
    value: str

    @classmethod
    def from_text(cls, text: str) -> CSSProperty:
        """Split raw declaration text on its first colon."""
        name, _, value = text.partition(":")
        return cls(name=name.strip(), value=value.strip())


@dataclass(frozen=True)
class Declaration:
    """A single property declaration together with its owning selector."""

    selector: str
    property: CSSProperty
    range: SourceRange


@dataclass(frozen=True)
class StyleSheetHeader:
    """Metadata carried by a stylesheet-added notification."""

    id: str
    origin: StyleSheetOrigin | None
    source_url: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> StyleSheetHeader:
        """Build a header from a ``CSS.styleSheetAdded`` event payload.

        Accepts either the full event (``{"header": {...}}``) or the header
        object itself.
        """
        header = payload.get("header", payload)
        return cls(
            id=str(header["styleSheetId"]),
            origin=StyleSheetOrigin.parse(header.get("origin", "")),
            source_url=header.get("sourceURL", "") or "",
        )


@dataclass(frozen=True)
class StyleSheetRecord:
    """A fetched and parsed stylesheet that was active during a session."""

    id: str
    origin: StyleSheetOrigin
    source_url: str
    content: str
    declarations: tuple[Declaration, ...] = field(default_factory=tuple)

    @classmethod
    def from_header(
        cls,
        header: StyleSheetHeader,
        content: str,
        declarations: tuple[Declaration, ...],
    ) -> StyleSheetRecord:
        return cls(
            id=header.id,
            origin=header.origin or StyleSheetOrigin.REGULAR,
            source_url=header.source_url,
            content=content,
            declarations=tuple(declarations),
        )
