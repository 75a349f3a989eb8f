from __future__ import annotations

from .application import Application, ApplicationRegistry, get_default_registry
from .artifact import Artifact
from .control import Control
from .page import Page
from .region import Region

__all__ = [
    "Application",
    "ApplicationRegistry",
    "Artifact",
    "Control",
    "Page",
    "Region",
    "get_default_registry",
]
