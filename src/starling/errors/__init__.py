"""Custom exception hierarchy for Starling."""

from __future__ import annotations


class StarlingError(Exception):
    """Base class for all custom errors raised by Starling."""


class DomainError(StarlingError):
    """Base class for domain-level errors."""


class ApplicationError(StarlingError):
    """Base class for application-level errors."""


# --- Domain errors ---

class InvalidHandlerError(DomainError, ValueError):
    """Raised when bound data is requested for a handler that has none.

    Only the four edges carry a value and bounds; asking for ``BOX``,
    ``NONE`` or a corner is a logic error in the caller.
    """


# --- Settings errors ---

class SettingsError(ApplicationError):
    """Base class for settings related failures."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "ApplicationError",
    "DomainError",
    "InvalidHandlerError",
    "SettingsError",
    "SettingsValidationError",
    "StarlingError",
]
