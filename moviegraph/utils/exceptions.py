"""Exception hierarchy for the movie graph service."""

from __future__ import annotations


class MovieGraphError(Exception):
    """Base exception for all movie graph errors."""


class GraphQueryError(MovieGraphError):
    """A Cypher query failed to execute (connectivity, syntax, authorization)."""

    def __init__(self, operation: str, cause: Exception) -> None:
        super().__init__(f"{operation} query failed: {cause}")
        self.operation = operation
        self.cause = cause
