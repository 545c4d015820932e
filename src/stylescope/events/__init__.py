from stylescope.events.bus import EventBus
from stylescope.events.stats import TrackerStats
from stylescope.events.types import (
    SessionEnded,
    SessionStarted,
    StyleSheetDropped,
    StyleSheetIgnored,
    StyleSheetRemoved,
    StyleSheetTracked,
)

__all__ = [
    "EventBus",
    "TrackerStats",
    "SessionEnded",
    "SessionStarted",
    "StyleSheetDropped",
    "StyleSheetIgnored",
    "StyleSheetRemoved",
    "StyleSheetTracked",
]
