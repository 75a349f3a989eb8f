from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from ..errors import MissingArgumentError, TypeMismatchError
from .session import BrowserSession

logger = logging.getLogger(__name__)


def open_url(session: BrowserSession, url_template: str) -> Callable[[Any], str]:
    """Build a ``Page.add_navigation`` hook that opens ``url_template``.

    Placeholders are filled from the options passed to ``Page.navigate``:
    ``open_url(session, "/users/{user_id}")`` navigated with
    ``{"user_id": 7}`` opens ``/users/7``. Relative urls resolve against the
    session base url.
    """

    def navigate(options: Any) -> str:
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise TypeMismatchError(f"Navigation options must be a mapping, got {type(options).__name__}")
        try:
            url = url_template.format(**options)
        except KeyError as exc:
            raise MissingArgumentError(f'Navigation to "{url_template}" needs option "{exc.args[0]}"') from exc
        logger.info("Navigating to %s", url)
        session.page.goto(url, wait_until="domcontentloaded", timeout=session.timeout_ms)
        return session.page.url

    return navigate
