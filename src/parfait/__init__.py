from __future__ import annotations

from .core import Application, ApplicationRegistry, Artifact, Control, Page, Region, get_default_registry
from .types import ByInstance, ByKey, ByKeyAndFilter, ByName

__version__ = "0.1.0"

__all__ = [
    "Application",
    "ApplicationRegistry",
    "Artifact",
    "ByInstance",
    "ByKey",
    "ByKeyAndFilter",
    "ByName",
    "Control",
    "Page",
    "Region",
    "get_default_registry",
]
