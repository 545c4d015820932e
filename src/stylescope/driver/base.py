"""Driver protocol: the browser channel the tracker talks to."""

from __future__ import annotations

from typing import Any, Callable, Protocol

EventHandler = Callable[[dict[str, Any]], None]


class Driver(Protocol):
    """Protocol for objects that expose a DevTools-style instrumentation channel.

    ``fetch_text`` may raise any exception; the tracker treats a failure as
    "drop this stylesheet".
    """

    async def enable_domain(self, name: str) -> None: ...

    async def disable_domain(self, name: str) -> None: ...

    def subscribe(self, event: str, handler: EventHandler) -> None: ...

    def unsubscribe(self, event: str, handler: EventHandler) -> None: ...

    async def fetch_text(self, stylesheet_id: str) -> str: ...
