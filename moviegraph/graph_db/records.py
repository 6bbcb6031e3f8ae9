"""Typed value extraction from Neo4j result rows.

Rows come back as ``dict[str, Any]`` and any column may be missing, null, or
of a type other than the one the caller expects. Each getter returns a default
in those cases instead of raising, so a single bad field never fails the whole
response.
"""

from __future__ import annotations

from typing import Any, Mapping

Row = Mapping[str, Any]


def get_optional_str(row: Row, key: str) -> str | None:
    value = row.get(key)
    return value if isinstance(value, str) else None


def get_str(row: Row, key: str, default: str = "") -> str:
    value = get_optional_str(row, key)
    return default if value is None else value


def get_optional_int(row: Row, key: str) -> int | None:
    value = row.get(key)
    # bool is an int subclass but never a valid count or year
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def get_int(row: Row, key: str, default: int = 0) -> int:
    value = get_optional_int(row, key)
    return default if value is None else value


def get_str_list(row: Row, key: str) -> list[str]:
    """Return a list of strings, or [] when the column is not exactly that.

    A list holding anything other than strings is treated as absent as a
    whole; partial lists are never returned.
    """
    value = row.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    if not all(isinstance(item, str) for item in value):
        return []
    return list(value)
