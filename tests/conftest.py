from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest

ADDED = "CSS.styleSheetAdded"
REMOVED = "CSS.styleSheetRemoved"


class FakeDriver:
    """In-memory driver: stylesheet texts by id, optional gates and failures."""

    def __init__(self, texts: dict[str, str] | None = None) -> None:
        self.texts: dict[str, str] = dict(texts or {})
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, str]] = []
        self.handlers: dict[str, list[Callable[[dict[str, Any]], None]]] = {}
        self._gates: dict[str, asyncio.Event] = {}

    # --- Driver protocol ---

    async def enable_domain(self, name: str) -> None:
        self.calls.append(("enable", name))

    async def disable_domain(self, name: str) -> None:
        self.calls.append(("disable", name))

    def subscribe(self, event: str, handler) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler) -> None:
        self.handlers.get(event, []).remove(handler)

    async def fetch_text(self, stylesheet_id: str) -> str:
        gate = self._gates.get(stylesheet_id)
        if gate is not None:
            await gate.wait()
        if stylesheet_id in self.failures:
            raise self.failures[stylesheet_id]
        return self.texts[stylesheet_id]

    # --- test controls ---

    def hold(self, stylesheet_id: str) -> asyncio.Event:
        """Block the fetch of *stylesheet_id* until the returned event is set."""
        gate = asyncio.Event()
        self._gates[stylesheet_id] = gate
        return gate

    def added(self, stylesheet_id: str, origin: str = "regular", url: str = "") -> None:
        payload = {"header": {"styleSheetId": stylesheet_id, "origin": origin, "sourceURL": url}}
        for handler in list(self.handlers.get(ADDED, [])):
            handler(payload)

    def removed(self, stylesheet_id: str) -> None:
        for handler in list(self.handlers.get(REMOVED, [])):
            handler({"styleSheetId": stylesheet_id})

    def subscriber_count(self) -> int:
        return sum(len(h) for h in self.handlers.values())


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver(
        {
            "1": "a { color: red; }",
            "2": ".box { display: box; }",
            "3": "p { margin: 0; }",
        }
    )


@pytest.fixture
def make_driver() -> Callable[..., FakeDriver]:
    return FakeDriver
