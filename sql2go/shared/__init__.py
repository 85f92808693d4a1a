"""Shared utilities for sql2go."""

from .errors import (
    Sql2GoError,
    ConfigError,
    UnknownDriverError,
    DatabaseConnectionError,
    QueryError,
    RowScanError,
    UnsupportedTypeError,
    RenderError,
    OutputError,
)
from .naming import (
    upper_first,
    record_type_name,
    collection_type_name,
    split_table_filter,
)
from .model import (
    Column,
    Table,
    GenerateOptions,
    SQL_ROWS_TYPE,
    INTERFACE_ROWS_TYPE,
    row_type_for,
)
from .config_loader import (
    GeneratorConfig,
    load_config,
)

__all__ = [
    # Errors
    "Sql2GoError",
    "ConfigError",
    "UnknownDriverError",
    "DatabaseConnectionError",
    "QueryError",
    "RowScanError",
    "UnsupportedTypeError",
    "RenderError",
    "OutputError",
    # Naming utilities
    "upper_first",
    "record_type_name",
    "collection_type_name",
    "split_table_filter",
    # Model
    "Column",
    "Table",
    "GenerateOptions",
    "SQL_ROWS_TYPE",
    "INTERFACE_ROWS_TYPE",
    "row_type_for",
    # Configuration
    "GeneratorConfig",
    "load_config",
]
