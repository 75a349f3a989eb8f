from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any, Callable

from ..errors import ElementLookupError, MissingArgumentError, TypeMismatchError, UnconfiguredHookError
from ..types import ApplicationTarget, ByInstance, parse_options, region_selector
from .application import Application, ApplicationRegistry, application_target, get_default_registry
from .artifact import Artifact
from .control import Control
from .region import Region

logger = logging.getLogger(__name__)


class Page(Artifact):
    """One screen of the application under test.

    Regions and controls are indexed under their name and every alias they
    declare, so tests can use whichever synonym reads best::

        page = Page(name="Prescription New", aliases=["New Rx", "Rx New"])
        page.add_control(Control(name="Prescriber Name", aliases=["Prescriber"]))
        page.add_region(Region(name="User List"))

        page.control("Prescriber")
        page.region({"User List": username})

    Every lookup re-runs the page presence check before returning, so a test
    never receives an element of a page that is not on screen.
    """

    def __init__(
        self,
        name: str | None = None,
        aliases: list[str] | tuple[str, ...] | None = None,
        registry: ApplicationRegistry | None = None,
    ) -> None:
        options = parse_options("Page", name=name, aliases=aliases)
        self._name = options.name
        self._aliases = options.aliases
        self._registry = registry
        self._controls: dict[Any, Control] = {}
        self._regions: dict[Any, Region] = {}
        self._page_test: Callable[[], Any] | None = None
        self._navigate_method: Callable[[Any], Any] | None = None
        super().__init__()

    @property
    def name(self) -> str:
        return self._name

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def registry(self) -> ApplicationRegistry:
        if self._registry is None:
            return get_default_registry()
        return self._registry

    def add_to_application(self, application: str | Application | ApplicationTarget) -> "Page":
        """Attach this page to ``application``, given by name or instance.

        A name that no registered application carries creates that
        application.
        """

        target = application_target(application)
        if isinstance(target, ByInstance):
            app = target.application
        else:
            app = self.registry.find(target.name)
            if app is None:
                logger.info("Creating application %s for page %s", target.name, self._name)
                app = Application(name=target.name, registry=self.registry)
        app.add_page(self)
        return self

    def add_region(self, region: Region) -> "Page":
        if region is None:
            raise MissingArgumentError("Region must be specified when adding a Region to a Page")
        if not isinstance(region, Region):
            raise TypeMismatchError("Region must be a Region when being added to a Page")

        self._regions[region.name] = region
        for alias in region.aliases:
            self._regions[alias] = region
        logger.debug("Registered region %s on page %s", region.name, self._name)
        return self

    def add_control(self, control: Control) -> "Page":
        if control is None:
            raise MissingArgumentError("Control must be specified when adding a Control to a Page")
        if not isinstance(control, Control):
            raise TypeMismatchError("Control must be a Control when being added to a Page")

        self._controls[control.name] = control
        for alias in control.aliases:
            self._controls[alias] = control
        logger.debug("Registered control %s on page %s", control.name, self._name)
        return self

    def region(self, selector: Any) -> Region:
        """Return the region named by ``selector`` after filtering it.

        ``selector`` is either a region name or alias, or a single-entry
        mapping ``{name: filter_value}``. The bare form filters with ``None``.
        """

        selected = region_selector(selector)
        region = self._regions.get(selected.name)
        if region is None:
            raise ElementLookupError(f'Invalid region name requested: "{selected.name}"')

        self.verify_presence(
            f'Cannot navigate to region "{selected.name}" because page presence check failed'
        )

        region.filter(selected.filter_value)
        return region

    def control(self, requested_name: Any) -> Control:
        if not isinstance(requested_name, Hashable):
            raise TypeMismatchError(f"Control name must be hashable, got {type(requested_name).__name__}")
        control = self._controls.get(requested_name)
        if control is None:
            raise ElementLookupError(f'Invalid control name requested: "{requested_name}"')

        self.verify_presence(
            f'Cannot navigate to control "{requested_name}" because page presence check failed'
        )
        return control

    def add_page_test(self, method: Callable[[], Any]) -> "Page":
        self._page_test = method
        return self

    def page_test(self) -> Any:
        if self._page_test is None:
            raise UnconfiguredHookError(f'No page test defined for page "{self._name}"')
        return self._page_test()

    def add_navigation(self, method: Callable[[Any], Any]) -> "Page":
        """Set the hook ``navigate`` calls, e.g. ``parfait.browser.open_url(...)``."""

        self._navigate_method = method
        return self

    def navigate(self, options: Any = None) -> Any:
        if self._navigate_method is None:
            raise UnconfiguredHookError(f'No navigation defined for page "{self._name}"')
        return self._navigate_method({} if options is None else options)

    def region_names(self) -> list[Any]:
        return list(self._regions)

    def control_names(self) -> list[Any]:
        return list(self._controls)

    def has_region(self, name: Any) -> bool:
        return name in self._regions

    def has_control(self, name: Any) -> bool:
        return name in self._controls

    def describe(self) -> dict[str, Any]:
        """Map every registered key to the canonical name it resolves to.

        Does not verify presence.
        """

        return {
            "name": self._name,
            "aliases": list(self._aliases),
            "regions": {key: region.name for key, region in self._regions.items()},
            "controls": {key: control.name for key, control in self._controls.items()},
        }

    def __repr__(self) -> str:
        return f"Page(name={self._name!r})"
