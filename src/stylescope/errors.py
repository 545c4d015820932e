"""Error hierarchy for stylescope."""
from __future__ import annotations


class StyleScopeError(Exception):
    """Base error for all stylescope errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EmptyCollectionError(StyleScopeError):
    """Raised by ``end()`` when no stylesheet was tracked during the session.

    Callers treat this as "styles unavailable for this page" rather than a
    fatal condition.
    """


class SessionStateError(StyleScopeError):
    """Raised when tracker operations are used outside an active session."""


class StyleSheetFetchError(StyleScopeError):
    """Raised by a driver when the text of a stylesheet cannot be retrieved."""

    def __init__(
        self,
        message: str,
        *,
        stylesheet_id: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.stylesheet_id = stylesheet_id
