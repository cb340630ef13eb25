"""Errors raised while discovering the schema of an SQLite database."""

from __future__ import annotations


class DiscoveryError(Exception):
    """Base class for every error raised by schema discovery."""


class ParseIntegerError(DiscoveryError, ValueError):
    """A value read from the database could not be parsed as an integer."""

    def __init__(self) -> None:
        super().__init__("Parse Integer Error")


class ParseFloatError(DiscoveryError, ValueError):
    """A value read from the database could not be parsed as a float."""

    def __init__(self) -> None:
        super().__init__("Parse Float Error Error")


class DatabaseError(DiscoveryError):
    """The database driver reported an error while running a query."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Database Error: {cause}")


class NoIndexesFoundError(DiscoveryError, LookupError):
    """Index discovery was asked for a table that has no indexes."""

    def __init__(self) -> None:
        super().__init__("No Indexes Found Error")