from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..errors import ElementLookupError, MissingArgumentError, TypeMismatchError
from ..types import ApplicationTarget, ByInstance, ByName, parse_options

if TYPE_CHECKING:  # pragma: no cover
    from .page import Page

logger = logging.getLogger(__name__)


class ApplicationRegistry:
    """Applications known to a test process, keyed by name."""

    def __init__(self) -> None:
        self._applications: dict[str, Application] = {}

    def find(self, name: str) -> "Application | None":
        return self._applications.get(name)

    def register(self, application: "Application") -> None:
        if application.name in self._applications:
            logger.debug("Replacing application %s in registry", application.name)
        self._applications[application.name] = application

    def applications(self) -> list["Application"]:
        return list(self._applications.values())

    def clear(self) -> None:
        self._applications.clear()

    def __len__(self) -> int:
        return len(self._applications)


_default_registry: ApplicationRegistry | None = None


def get_default_registry() -> ApplicationRegistry:
    """Return the process-wide registry, creating it on first use."""

    global _default_registry
    if _default_registry is None:
        _default_registry = ApplicationRegistry()
    return _default_registry


class Application:
    """Collection of pages making up one system under test."""

    def __init__(
        self,
        name: str | None = None,
        aliases: list[str] | tuple[str, ...] | None = None,
        registry: ApplicationRegistry | None = None,
    ) -> None:
        options = parse_options("Application", name=name, aliases=aliases)
        self._name = options.name
        self._aliases = options.aliases
        self._pages: dict[str, Page] = {}
        self._registry = registry if registry is not None else get_default_registry()
        self._registry.register(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def registry(self) -> ApplicationRegistry:
        return self._registry

    def add_page(self, page: "Page") -> "Application":
        from .page import Page

        if page is None:
            raise MissingArgumentError("Page must be specified when adding a Page to an Application")
        if not isinstance(page, Page):
            raise TypeMismatchError("Page must be a Page when being added to an Application")

        self._pages[page.name] = page
        for alias in page.aliases:
            self._pages[alias] = page
        logger.debug("Added page %s to application %s", page.name, self._name)
        return self

    def page(self, requested_name: str) -> "Page":
        page = self._pages.get(requested_name)
        if page is None:
            raise ElementLookupError(f'Invalid page name requested: "{requested_name}"')

        page.verify_presence(
            f'Cannot navigate to page "{requested_name}" because page presence check failed'
        )
        return page

    def page_names(self) -> list[str]:
        return list(self._pages)

    def pages(self) -> list["Page"]:
        """Distinct pages in the order they were added."""

        unique: list[Page] = []
        for page in self._pages.values():
            if not any(existing is page for existing in unique):
                unique.append(page)
        return unique

    def __repr__(self) -> str:
        return f"Application(name={self._name!r})"


def application_target(value: Any) -> ApplicationTarget:
    """Normalise an application name or instance into an ``ApplicationTarget``."""

    if isinstance(value, (ByName, ByInstance)):
        return value
    if value is None:
        raise MissingArgumentError("Input value cannot be None when adding a Page to an Application")
    if isinstance(value, str):
        return ByName(name=value)
    if isinstance(value, Application):
        return ByInstance(application=value)
    raise TypeMismatchError(
        "Input value must be a str or an Application when adding a Page to an Application, "
        f"got {type(value).__name__}"
    )
