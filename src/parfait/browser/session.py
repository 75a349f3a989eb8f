from __future__ import annotations

import logging
from pathlib import Path

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from ..config import Settings
from ..errors import BrowserError

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns the Playwright browser that presence checks and navigation hooks drive."""

    def __init__(
        self,
        settings: Settings,
        headless: bool | None = None,
        user_data_dir: Path | None = None,
    ) -> None:
        self._settings = settings
        self._headless = settings.headless_default if headless is None else headless
        self._user_data_dir = user_data_dir.expanduser() if user_data_dir else None
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    def __enter__(self) -> "BrowserSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.stop()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def timeout_ms(self) -> int:
        return self._settings.step_timeout_ms

    def start(self) -> None:
        if self._page is not None:
            return
        playwright = sync_playwright().start()
        self._playwright = playwright
        browser_type = getattr(playwright, self._settings.browser_name)

        logger.info("Launching %s (headless=%s)", self._settings.browser_name, self._headless)
        try:
            if self._user_data_dir is not None:
                self._user_data_dir.mkdir(parents=True, exist_ok=True)
                self._context = browser_type.launch_persistent_context(
                    str(self._user_data_dir),
                    headless=self._headless,
                    base_url=self._settings.base_url,
                )
                self._browser = self._context.browser
                page = self._context.pages[0] if self._context.pages else self._context.new_page()
            else:
                self._browser = browser_type.launch(headless=self._headless)
                self._context = self._browser.new_context(base_url=self._settings.base_url)
                page = self._context.new_page()
            page.set_default_timeout(self.timeout_ms)
        except Exception:
            logger.error("Failed to launch %s", self._settings.browser_name, exc_info=True)
            self.stop()
            raise
        self._page = page

    def stop(self) -> None:
        if self._page is not None:
            self._page.close()
        if self._context is not None:
            self._context.close()
        if self._browser is not None:
            self._browser.close()
        if self._playwright is not None:
            self._playwright.stop()
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise BrowserError("Browser session not started")
        return self._page
