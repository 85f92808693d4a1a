"""Naming utilities for code generation."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=1024)
def upper_first(value: str) -> str:
    """Upper-case the first character of a string, leaving the rest alone.

    Uses caching for repeated calls with the same input.

    Examples:
        >>> upper_first("userId")
        'UserId'
        >>> upper_first("user_id")
        'User_id'
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


@lru_cache(maxsize=1024)
def record_type_name(table_name: str) -> str:
    """Name of the generated Go struct holding one row of a table."""
    return f"{upper_first(table_name)}Row"


@lru_cache(maxsize=1024)
def collection_type_name(table_name: str) -> str:
    """Name of the generated Go slice type holding many rows of a table."""
    return f"{upper_first(table_name)}Rows"


def split_table_filter(tables: str | None) -> list[str]:
    """Split a comma separated table allow-list.

    Surrounding whitespace is stripped and empty entries are dropped, so
    ``"users, orders,"`` yields ``["users", "orders"]``.
    """
    if not tables:
        return []
    return [name.strip() for name in tables.split(",") if name.strip()]
