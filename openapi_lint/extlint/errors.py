"""Exception types raised by the linter."""

from __future__ import annotations


class ExtlintError(Exception):
    """Base class for all linter errors."""


class LoadFailure(ExtlintError):
    """A source document could not be read or parsed.

    Fatal: the run aborts before any traversal happens.
    """

    def __init__(self, source: str, cause: Exception | str) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"Error parsing schema file {source}: {cause}")


class FieldNotFound(ExtlintError, KeyError):
    """Lookup of a named field that the container does not have."""

    def __init__(self, name: str, path: str = "") -> None:
        self.name = name
        self.path = path
        super().__init__(name)

    def __str__(self) -> str:
        where = self.path or "/"
        return f"Field '{self.name}' not found at {where}"


class RunStateError(ExtlintError):
    """A run controller operation was called out of order."""
