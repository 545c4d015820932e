"""Event types emitted by the stylesheet tracker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionStarted:
    pass


@dataclass(frozen=True)
class SessionEnded:
    active_count: int
    unique_count: int


@dataclass(frozen=True)
class StyleSheetIgnored:
    stylesheet_id: str
    origin: str


@dataclass(frozen=True)
class StyleSheetTracked:
    stylesheet_id: str
    source_url: str
    declaration_count: int


@dataclass(frozen=True)
class StyleSheetDropped:
    stylesheet_id: str
    error: str


@dataclass(frozen=True)
class StyleSheetRemoved:
    stylesheet_id: str
    pending: bool  # removal arrived before fetch/parse finished
