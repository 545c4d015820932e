"""Diagnostic counters fed from the tracker's event bus."""
from __future__ import annotations

from dataclasses import dataclass

from stylescope.events.bus import EventBus
from stylescope.events.types import (
    SessionStarted,
    StyleSheetDropped,
    StyleSheetIgnored,
    StyleSheetRemoved,
    StyleSheetTracked,
)


@dataclass
class TrackerStats:
    """Counts what happened to stylesheets during one session."""

    tracked: int = 0
    ignored: int = 0
    dropped: int = 0
    removed: int = 0
    removed_while_pending: int = 0

    def reset(self) -> None:
        self.tracked = 0
        self.ignored = 0
        self.dropped = 0
        self.removed = 0
        self.removed_while_pending = 0

    def attach(self, bus: EventBus) -> TrackerStats:
        """Subscribe the counters to *bus* and return self."""
        bus.subscribe(SessionStarted, lambda _event: self.reset())
        bus.subscribe(StyleSheetTracked, self._on_tracked)
        bus.subscribe(StyleSheetIgnored, self._on_ignored)
        bus.subscribe(StyleSheetDropped, self._on_dropped)
        bus.subscribe(StyleSheetRemoved, self._on_removed)
        return self

    def _on_tracked(self, event: StyleSheetTracked) -> None:
        self.tracked += 1

    def _on_ignored(self, event: StyleSheetIgnored) -> None:
        self.ignored += 1

    def _on_dropped(self, event: StyleSheetDropped) -> None:
        self.dropped += 1

    def _on_removed(self, event: StyleSheetRemoved) -> None:
        if event.pending:
            self.removed_while_pending += 1
        else:
            self.removed += 1
