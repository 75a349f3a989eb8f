from __future__ import annotations

import logging
from typing import Callable

from ..errors import PresenceVerificationError, UnconfiguredHookError

logger = logging.getLogger(__name__)

PresenceCheck = Callable[[], object]


class Artifact:
    """Base for anything a test can ask to confirm is currently displayed.

    A presence check is a zero-argument callable returning a truthy value while
    the artifact is on screen. Artifacts without a check are assumed present.
    """

    def __init__(self) -> None:
        self._presence_check: PresenceCheck | None = None

    def add_presence(self, check: PresenceCheck) -> "Artifact":
        self._presence_check = check
        return self

    def present(self) -> bool:
        if self._presence_check is None:
            raise UnconfiguredHookError(f"No presence check defined for {self!r}")
        return bool(self._presence_check())

    def verify_presence(self, message: str) -> None:
        """Raise ``PresenceVerificationError(message)`` unless the presence check passes."""

        if self._presence_check is None:
            return
        if not self.present():
            logger.info("Presence check failed for %r: %s", self, message)
            raise PresenceVerificationError(message)
