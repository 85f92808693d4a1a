"""Table and column model shared by the schema readers and the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .naming import collection_type_name, record_type_name

# Row cursor types referenced by generated scan functions
SQL_ROWS_TYPE: Final[str] = "*sql.Rows"
INTERFACE_ROWS_TYPE: Final[str] = "Rows"


def row_type_for(generate_interface: bool) -> str:
    """Select the row cursor type generated scanners accept."""
    return INTERFACE_ROWS_TYPE if generate_interface else SQL_ROWS_TYPE


@dataclass(frozen=True, slots=True)
class Column:
    """A table column with its Go field name and Go type."""

    name: str
    type: str


@dataclass(frozen=True, slots=True)
class Table:
    """A table with its columns in the order the database reported them."""

    name: str
    columns: tuple[Column, ...]
    row_type: str = SQL_ROWS_TYPE

    @property
    def record_name(self) -> str:
        return record_type_name(self.name)

    @property
    def collection_name(self) -> str:
        return collection_type_name(self.name)


@dataclass(frozen=True, slots=True)
class GenerateOptions:
    """Options controlling what the renderer emits.

    ``export_fields`` is applied when columns are read; the renderer emits
    field names as stored. ``row_type`` is the cursor type every table
    rendered under these options must carry.
    """

    package: str = "main"
    export_fields: bool = True
    generate_interface: bool = False

    @property
    def row_type(self) -> str:
        return row_type_for(self.generate_interface)
