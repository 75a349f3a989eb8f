from __future__ import annotations

import logging
from typing import Any, Callable

from ..types import parse_options
from .artifact import Artifact

logger = logging.getLogger(__name__)


class Region(Artifact):
    """Named, filterable sub-area of a page, e.g. a list narrowed to one row."""

    def __init__(
        self,
        name: str | None = None,
        aliases: list[str] | tuple[str, ...] | None = None,
    ) -> None:
        options = parse_options("Region", name=name, aliases=aliases)
        self._name = options.name
        self._aliases = options.aliases
        self._filter_method: Callable[[Any], Any] | None = None
        self.filter_value: Any = None
        super().__init__()

    @property
    def name(self) -> str:
        return self._name

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    def add_filter(self, method: Callable[[Any], Any]) -> "Region":
        self._filter_method = method
        return self

    def filter(self, value: Any) -> None:
        """Remember ``value`` and hand it to the filter hook, if any."""

        self.filter_value = value
        if self._filter_method is not None:
            logger.debug("Filtering region %s with %r", self._name, value)
            self._filter_method(value)

    def __repr__(self) -> str:
        return f"Region(name={self._name!r})"
