"""Driver backed by a Playwright Chrome DevTools Protocol session."""

from __future__ import annotations

import logging

from playwright.async_api import CDPSession, Page
from playwright.async_api import Error as PlaywrightError

from stylescope.driver.base import EventHandler
from stylescope.errors import StyleSheetFetchError

logger = logging.getLogger(__name__)


class PlaywrightDriver:
    """Adapts a :class:`CDPSession` to the :class:`Driver` protocol."""

    def __init__(self, session: CDPSession) -> None:
        self._session = session

    @classmethod
    async def for_page(cls, page: Page) -> PlaywrightDriver:
        """Open a CDP session on *page* (Chromium only)."""
        session = await page.context.new_cdp_session(page)
        return cls(session)

    async def enable_domain(self, name: str) -> None:
        logger.debug("Enabling domain %s", name)
        await self._session.send(f"{name}.enable")

    async def disable_domain(self, name: str) -> None:
        logger.debug("Disabling domain %s", name)
        await self._session.send(f"{name}.disable")

    def subscribe(self, event: str, handler: EventHandler) -> None:
        self._session.on(event, handler)

    def unsubscribe(self, event: str, handler: EventHandler) -> None:
        self._session.remove_listener(event, handler)

    async def fetch_text(self, stylesheet_id: str) -> str:
        try:
            result = await self._session.send(
                "CSS.getStyleSheetText", {"styleSheetId": stylesheet_id}
            )
        except PlaywrightError as exc:
            raise StyleSheetFetchError(
                f"Could not fetch stylesheet {stylesheet_id}: {exc}",
                stylesheet_id=stylesheet_id,
                cause=exc,
            ) from exc
        return result.get("text", "")

    async def detach(self) -> None:
        await self._session.detach()
