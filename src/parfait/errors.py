from __future__ import annotations


class ParfaitError(Exception):
    """Base class for parfait specific exceptions."""


class ValidationError(ParfaitError):
    """Raised when page, region, control or application options are invalid."""


class TypeMismatchError(ParfaitError, TypeError):
    """Raised when an argument is not of the expected type or shape."""


class MissingArgumentError(ParfaitError, ValueError):
    """Raised when a required argument is None."""


class ElementLookupError(ParfaitError, LookupError):
    """Raised when a page, region or control name is not registered."""


class PresenceVerificationError(ParfaitError):
    """Raised when the expected artifact is not currently displayed."""


class UnconfiguredHookError(ParfaitError):
    """Raised when a presence, navigation or page test hook is invoked before being set."""


class BrowserError(ParfaitError):
    """Raised for Playwright session failures."""
