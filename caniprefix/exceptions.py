"""Exception types for caniprefix."""

from __future__ import annotations


class CaniuseError(Exception):
    """Base exception for expected application errors."""


class MalformedInputError(CaniuseError):
    """Raised when a raw support database cannot be decoded."""

    def __init__(self, *, cause: str | None = None) -> None:
        detail = "Unable to decode Can I Use database"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class DatabaseFileError(CaniuseError):
    """Raised when a database file cannot be read."""

    def __init__(self, path: str, *, cause: str | None = None) -> None:
        self.path = path
        detail = f"Unable to read Can I Use database from {path}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)
