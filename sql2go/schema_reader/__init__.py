"""Schema readers - read table and column metadata from live databases."""

from __future__ import annotations

from typing import Final

from ..shared import UnknownDriverError
from .base import SchemaReader
from .mysql import MySQLSchemaReader
from .sqlserver import SQLServerSchemaReader
from .types import DEFAULT_GO_TYPES, base_type_name, go_type

# Driver name to reader implementation
READERS: Final[dict[str, type[SchemaReader]]] = {
    MySQLSchemaReader.driver: MySQLSchemaReader,
    SQLServerSchemaReader.driver: SQLServerSchemaReader,
}


def new_schema_reader(
    driver: str,
    conn_str: str,
    export_fields: bool = True,
    db_interface: bool = False,
) -> SchemaReader:
    """Create the schema reader registered for ``driver``.

    Raises:
        UnknownDriverError: If no reader handles the driver.
    """
    reader_cls = READERS.get(driver)
    if reader_cls is None:
        raise UnknownDriverError(driver, sorted(READERS))
    return reader_cls(conn_str, export_fields=export_fields, db_interface=db_interface)


__all__ = [
    "SchemaReader",
    "MySQLSchemaReader",
    "SQLServerSchemaReader",
    "READERS",
    "new_schema_reader",
    "DEFAULT_GO_TYPES",
    "base_type_name",
    "go_type",
]
