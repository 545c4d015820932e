"""Collect the styles of a live page with headless Chromium."""

from __future__ import annotations

import logging

from playwright.async_api import async_playwright

from stylescope.config import ScanConfig, TrackerConfig
from stylescope.driver.playwright import PlaywrightDriver
from stylescope.events.stats import TrackerStats
from stylescope.gatherer import StylesGatherer, StylesUnavailable
from stylescope.model.stylesheet import StyleSheetRecord
from stylescope.tracker import StyleSheetTracker

logger = logging.getLogger(__name__)


def attach_diagnostics(tracker: StyleSheetTracker) -> TrackerStats:
    """Log every tracker event at debug level and count them."""
    tracker.bus.on_all(lambda event: logger.debug("Tracker event: %s", event))
    return TrackerStats().attach(tracker.bus)


async def scan_page(
    url: str,
    config: ScanConfig | None = None,
    tracker_config: TrackerConfig | None = None,
) -> list[StyleSheetRecord] | StylesUnavailable:
    """Load *url* and return its unique active stylesheets."""
    config = config or ScanConfig()
    tracker = StyleSheetTracker(tracker_config)
    stats = attach_diagnostics(tracker)
    gatherer = StylesGatherer(tracker)

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=config.headless)
        try:
            page = await browser.new_page()
            driver = await PlaywrightDriver.for_page(page)
            try:
                await gatherer.before_pass(driver)
                logger.info("Loading %s", url)
                await page.goto(url, wait_until=config.wait_until, timeout=config.navigation_timeout_ms)
                await page.wait_for_timeout(config.settle_ms)
                await tracker.wait_pending()
                styles = await gatherer.after_pass()
            finally:
                await driver.detach()
            logger.debug("Stylesheet stats for %s: %s", url, stats)
            return styles
        finally:
            await browser.close()
