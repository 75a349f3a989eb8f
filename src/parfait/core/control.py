from __future__ import annotations

from ..types import ControlOptions, parse_options
from .artifact import Artifact


class Control(Artifact):
    """Named interactive element of a page such as a field or a button."""

    def __init__(
        self,
        name: str | None = None,
        aliases: list[str] | tuple[str, ...] | None = None,
        text: str | None = None,
    ) -> None:
        options = parse_options("Control", ControlOptions, name=name, aliases=aliases, text=text)
        self._name = options.name
        self._aliases = options.aliases
        self._text = options.text or options.name
        super().__init__()

    @property
    def name(self) -> str:
        return self._name

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def text(self) -> str:
        """Human readable label used in messages."""

        return self._text

    def __repr__(self) -> str:
        return f"Control(name={self._name!r})"
