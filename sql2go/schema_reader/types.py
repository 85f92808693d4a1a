"""Mapping from native database column types to Go types."""

from __future__ import annotations

from typing import Final

from ..shared import UnsupportedTypeError

# Native type names (without size suffix) to Go types. Lookups are case sensitive.
DEFAULT_GO_TYPES: Final[dict[str, str]] = {
    # integer-like
    "int": "int",
    "bigint": "int",
    "mediumint": "int",
    "smallint": "int",
    "tinyint": "int",
    # bit/boolean-like
    "bit": "bool",
    "bool": "bool",
    "boolean": "bool",
    # character/text-like
    "char": "string",
    "nchar": "string",
    "varchar": "string",
    "nvarchar": "string",
    "text": "string",
    "ntext": "string",
    "tinytext": "string",
    "mediumtext": "string",
    "longtext": "string",
    # date/time-like
    "date": "time.Time",
    "datetime": "time.Time",
    "datetime2": "time.Time",
    "smalldatetime": "time.Time",
    "timestamp": "time.Time",
}


def base_type_name(native_type: str) -> str:
    """Strip a size suffix and trailing attributes from a native type.

    Examples:
        >>> base_type_name("varchar(50)")
        'varchar'
        >>> base_type_name("int(11) unsigned")
        'int'
        >>> base_type_name("int unsigned")
        'int'
    """
    head = native_type.split("(", 1)[0].strip()
    return head.split(" ", 1)[0]


def go_type(native_type: str, column_name: str, table_name: str) -> str:
    """Resolve the Go type for a native column type.

    Args:
        native_type: Type name as reported by the database.
        column_name: Column name, for error messages.
        table_name: Table name, for error messages.

    Returns:
        The Go type string.

    Raises:
        UnsupportedTypeError: If no type mapping exists.
    """
    base = base_type_name(native_type)
    mapped = DEFAULT_GO_TYPES.get(base)
    if mapped is None:
        raise UnsupportedTypeError(base, table_name, column_name)
    return mapped
