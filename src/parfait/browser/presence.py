"""Presence checks for ``Artifact.add_presence`` backed by a live browser page.

Each helper returns a zero-argument callable, evaluated only when a lookup
verifies presence, so page definitions can be built before the browser starts.
"""

from __future__ import annotations

import logging
from typing import Callable

from playwright.sync_api import Error as PlaywrightError

from .session import BrowserSession

logger = logging.getLogger(__name__)


def url_contains(session: BrowserSession, fragment: str) -> Callable[[], bool]:
    def check() -> bool:
        try:
            url = session.page.url or ""
        except PlaywrightError:
            logger.debug("Unable to read page url for presence check", exc_info=True)
            return False
        return fragment.lower() in url.lower()

    return check


def title_contains(session: BrowserSession, text: str) -> Callable[[], bool]:
    def check() -> bool:
        try:
            title = session.page.title() or ""
        except PlaywrightError:
            logger.debug("Unable to read page title for presence check", exc_info=True)
            return False
        return text.lower() in title.lower()

    return check


def selector_visible(session: BrowserSession, selector: str, timeout_ms: int | None = None) -> Callable[[], bool]:
    """Present once ``selector`` has a visible match within ``timeout_ms``."""

    def check() -> bool:
        timeout = session.timeout_ms if timeout_ms is None else timeout_ms
        locator = session.page.locator(selector).first
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightError:
            logger.debug("Selector %s not visible within %dms", selector, timeout)
            return False
        return True

    return check
