"""Exception types shared by the store, validation and presentation layers."""
from __future__ import annotations


class WorldClockError(RuntimeError):
    """Base class for all world clock failures."""


class TimezoneValidationError(WorldClockError):
    """Raised when an identifier is rejected on add."""

    def __init__(self, identifier: str, reason: str, message: str | None = None) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(message or f"{reason} timezone: {identifier!r}")


class StoreIOError(WorldClockError):
    """Raised when the timezone file cannot be created, read or written."""

    def __init__(self, path: object, action: str, original: Exception | None = None) -> None:
        self.path = path
        self.action = action
        self.original = original
        detail = f": {original}" if original else ""
        super().__init__(f"Could not {action} {path}{detail}")


class StoreDataError(WorldClockError):
    """Raised when the timezone file holds something other than a JSON array of strings."""

    def __init__(self, path: object, detail: str) -> None:
        self.path = path
        super().__init__(f"Corrupt timezone file {path}: {detail}")


class TimezoneFormatError(WorldClockError):
    """Raised when an instant cannot be rendered in a stored zone."""

    def __init__(self, identifier: str, original: Exception | None = None) -> None:
        self.identifier = identifier
        self.original = original
        super().__init__(f"Cannot render time for {identifier!r}")
