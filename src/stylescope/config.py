from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackerConfig:
    tracked_origins: tuple[str, ...] = ("regular",)
    enable_domains: tuple[str, ...] = ("DOM", "CSS")
    style_domain: str = "CSS"  # disabled when the session ends
    added_event: str = "CSS.styleSheetAdded"
    removed_event: str = "CSS.styleSheetRemoved"


@dataclass(frozen=True)
class ScanConfig:
    headless: bool = True
    wait_until: str = "load"  # "load", "domcontentloaded", "networkidle"
    navigation_timeout_ms: int = 60_000
    settle_ms: int = 1_000  # time given to late stylesheets after navigation
    http_timeout_s: float = 30.0  # used when inspecting a stylesheet by URL
