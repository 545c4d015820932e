"""Tracks the stylesheets that are active on a page during one session.

A session runs ``NOT_STARTED -> ACTIVE -> ENDED``. While active, every
``regular`` stylesheet announced by the driver is fetched and parsed on its
own asyncio task; it joins the active set only once both steps succeed, so
the active set is ordered by resolution, not by announcement.

A stylesheet whose fetch or parse is still running is *pending*. A removal
that arrives for a pending stylesheet marks it, and the stylesheet is
discarded when its work finishes instead of being added.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from stylescope.config import TrackerConfig
from stylescope.driver.base import Driver
from stylescope.errors import EmptyCollectionError, SessionStateError
from stylescope.events.bus import EventBus
from stylescope.events.types import (
    SessionEnded,
    SessionStarted,
    StyleSheetDropped,
    StyleSheetIgnored,
    StyleSheetRemoved,
    StyleSheetTracked,
)
from stylescope.model.stylesheet import Declaration, StyleSheetHeader, StyleSheetRecord
from stylescope.parser.declarations import parse_declarations

logger = logging.getLogger(__name__)

DeclarationParser = Callable[[str], Iterable[Declaration]]


class SessionState(Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass
class _PendingStyleSheet:
    header: StyleSheetHeader
    removed: bool = False


def dedupe_by_content(records: Iterable[StyleSheetRecord]) -> list[StyleSheetRecord]:
    """Keep one record per distinct ``content``; the last one seen wins."""
    unique: dict[str, StyleSheetRecord] = {}
    for record in records:
        unique[record.content] = record
    return list(unique.values())


class StyleSheetTracker:
    """Owns the active stylesheet set for one collection session at a time."""

    def __init__(
        self,
        config: TrackerConfig | None = None,
        *,
        bus: EventBus | None = None,
        parser: DeclarationParser = parse_declarations,
    ) -> None:
        self._config = config or TrackerConfig()
        self._bus = bus or EventBus()
        self._parser = parser
        self._state = SessionState.NOT_STARTED
        self._driver: Driver | None = None
        self._active: list[StyleSheetRecord] = []
        self._pending: dict[str, _PendingStyleSheet] = {}
        self._tasks: set[asyncio.Task] = set()

    # --- read-only views ------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def active(self) -> tuple[StyleSheetRecord, ...]:
        return tuple(self._active)

    @property
    def pending_ids(self) -> tuple[str, ...]:
        return tuple(self._pending)

    # --- session --------------------------------------------------------------

    async def start(self, driver: Driver) -> None:
        """Begin a session on *driver*. Calling it again while active does nothing."""
        if self._state is SessionState.ACTIVE:
            logger.debug("Style collection already active; ignoring start()")
            return

        self._driver = driver
        self._active = []
        self._pending = {}
        self._state = SessionState.ACTIVE

        # Subscribe before enabling: enabling CSS replays the sheets already
        # on the page as added events.
        driver.subscribe(self._config.added_event, self._handle_added)
        driver.subscribe(self._config.removed_event, self._handle_removed)
        for domain in self._config.enable_domains:
            await driver.enable_domain(domain)

        logger.info("Style collection started")
        self._bus.emit(SessionStarted())

    async def end(self) -> list[StyleSheetRecord]:
        """Finish the session and return the deduplicated active stylesheets.

        Raises:
            EmptyCollectionError: if the session was never started or no
                stylesheet was tracked. The session is torn down either way.
        """
        if self._state is not SessionState.ACTIVE:
            raise EmptyCollectionError("Style collection was never started.")

        snapshot = list(self._active)
        await self._teardown()

        if not snapshot:
            raise EmptyCollectionError("No active stylesheets were collected.")

        stylesheets = dedupe_by_content(snapshot)
        logger.info(
            "Style collection ended: %d active, %d unique",
            len(snapshot),
            len(stylesheets),
        )
        self._bus.emit(SessionEnded(active_count=len(snapshot), unique_count=len(stylesheets)))
        return stylesheets

    async def wait_pending(self) -> None:
        """Wait until no fetch/parse task is left, including ones started meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _teardown(self) -> None:
        driver = self._driver
        assert driver is not None
        driver.unsubscribe(self._config.added_event, self._handle_added)
        driver.unsubscribe(self._config.removed_event, self._handle_removed)
        self._state = SessionState.ENDED
        self._driver = None
        self._active = []
        self._pending = {}
        await driver.disable_domain(self._config.style_domain)

    # --- notifications --------------------------------------------------------

    def on_added(self, header: StyleSheetHeader) -> asyncio.Task | None:
        """Handle a stylesheet-added notification.

        Returns the task resolving the stylesheet, or None if it is not tracked.
        """
        self._require_active()
        origin = header.origin.value if header.origin else "unknown"
        if origin not in self._config.tracked_origins:
            logger.debug("Ignoring %s stylesheet %s", origin, header.id)
            self._bus.emit(StyleSheetIgnored(stylesheet_id=header.id, origin=origin))
            return None
        if header.id in self._pending or any(r.id == header.id for r in self._active):
            logger.debug("Stylesheet %s is already tracked", header.id)
            return None

        pending = _PendingStyleSheet(header=header)
        self._pending[header.id] = pending
        task = asyncio.get_running_loop().create_task(self._resolve(pending, self._driver))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def on_removed(self, stylesheet_id: str) -> None:
        """Handle a stylesheet-removed notification."""
        self._require_active()
        for index, record in enumerate(self._active):
            if record.id == stylesheet_id:
                del self._active[index]
                logger.debug("Removed stylesheet %s", stylesheet_id)
                self._bus.emit(StyleSheetRemoved(stylesheet_id=stylesheet_id, pending=False))
                return

        pending = self._pending.get(stylesheet_id)
        if pending is not None and not pending.removed:
            pending.removed = True
            logger.debug("Stylesheet %s removed before it resolved", stylesheet_id)
            self._bus.emit(StyleSheetRemoved(stylesheet_id=stylesheet_id, pending=True))

    def _handle_added(self, payload: dict[str, Any]) -> None:
        self.on_added(StyleSheetHeader.from_payload(payload))

    def _handle_removed(self, payload: dict[str, Any]) -> None:
        self.on_removed(str(payload["styleSheetId"]))

    def _require_active(self) -> None:
        if self._state is not SessionState.ACTIVE:
            raise SessionStateError(
                f"Stylesheet notifications need an active session (state: {self._state.value})"
            )

    # --- resolution -----------------------------------------------------------

    async def _resolve(self, pending: _PendingStyleSheet, driver: Driver) -> None:
        header = pending.header
        try:
            content = await driver.fetch_text(header.id)
            declarations = tuple(self._parser(content))
        except Exception as exc:  # one bad stylesheet must not end the session
            logger.debug("Dropping stylesheet %s: %s", header.id, exc)
            if self._pending.get(header.id) is pending:
                del self._pending[header.id]
                self._bus.emit(StyleSheetDropped(stylesheet_id=header.id, error=str(exc)))
            return

        # The session ended or restarted while this stylesheet was in flight.
        if self._pending.get(header.id) is not pending:
            return
        del self._pending[header.id]

        if pending.removed:
            logger.debug("Discarding stylesheet %s removed while pending", header.id)
            return

        record = StyleSheetRecord.from_header(header, content, declarations)
        self._active.append(record)
        logger.debug(
            "Tracked stylesheet %s (%s, %d declarations)",
            record.id,
            record.source_url or "inline",
            len(record.declarations),
        )
        self._bus.emit(
            StyleSheetTracked(
                stylesheet_id=record.id,
                source_url=record.source_url,
                declaration_count=len(record.declarations),
            )
        )
