"""Pass-level wrapper turning a tracker session into a styles artifact."""

from __future__ import annotations

import logging

from stylescope.driver.base import Driver
from stylescope.errors import EmptyCollectionError
from stylescope.model.stylesheet import StyleSheetRecord
from stylescope.tracker import StyleSheetTracker

logger = logging.getLogger(__name__)


class StylesUnavailable:
    """Sentinel artifact for a page where no stylesheet could be collected."""

    def __repr__(self) -> str:
        return "STYLES_UNAVAILABLE"

    def __bool__(self) -> bool:
        return False


STYLES_UNAVAILABLE = StylesUnavailable()


class StylesGatherer:
    """Collects the active, unique stylesheets of a page across one pass."""

    def __init__(self, tracker: StyleSheetTracker | None = None) -> None:
        self.tracker = tracker or StyleSheetTracker()
        self.artifact: list[StyleSheetRecord] | StylesUnavailable | None = None

    async def before_pass(self, driver: Driver) -> None:
        self.artifact = None
        await self.tracker.start(driver)

    async def after_pass(self) -> list[StyleSheetRecord] | StylesUnavailable:
        try:
            self.artifact = await self.tracker.end()
        except EmptyCollectionError as exc:
            logger.info("Styles unavailable: %s", exc)
            self.artifact = STYLES_UNAVAILABLE
        return self.artifact
