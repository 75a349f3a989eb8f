from __future__ import annotations

from .navigation import open_url
from .presence import selector_visible, title_contains, url_contains
from .session import BrowserSession

__all__ = [
    "BrowserSession",
    "open_url",
    "selector_visible",
    "title_contains",
    "url_contains",
]
