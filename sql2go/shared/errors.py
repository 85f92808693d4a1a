"""Custom exceptions for sql2go."""

from __future__ import annotations


class Sql2GoError(Exception):
    """Base exception for every fatal generator error."""

    def __init__(self, message: str, context: str | None = None) -> None:
        self.context = context
        full_message = f"{message}" if not context else f"[{context}] {message}"
        super().__init__(full_message)


class ConfigError(Sql2GoError):
    """Raised when the configuration file or merged settings are invalid."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        key: str | None = None,
    ) -> None:
        self.key = key
        if key:
            message = f"Key '{key}': {message}"
        super().__init__(message, config_path)


class UnknownDriverError(Sql2GoError):
    """Raised when no schema reader is registered for a driver name."""

    def __init__(self, driver: str, supported: list[str]) -> None:
        self.driver = driver
        super().__init__(
            f"Unknown driver '{driver}' (supported: {', '.join(supported)})"
        )


class DatabaseConnectionError(Sql2GoError):
    """Raised when a database connection cannot be opened."""

    def __init__(self, message: str, driver: str | None = None) -> None:
        self.driver = driver
        super().__init__(message, driver)


class QueryError(Sql2GoError):
    """Raised when a query fails to execute."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        super().__init__(f"Query failed: {reason}", query)


class RowScanError(Sql2GoError):
    """Raised when a result row cannot be decoded."""

    def __init__(self, message: str, query: str | None = None) -> None:
        self.query = query
        super().__init__(message, query)


class UnsupportedTypeError(Sql2GoError):
    """Raised when a native column type has no Go mapping."""

    def __init__(self, type_name: str, table: str, column: str) -> None:
        self.type_name = type_name
        self.table = table
        self.column = column
        super().__init__(
            f"don't know how to convert type: {type_name} [{table}.{column}]"
        )


class RenderError(Sql2GoError):
    """Raised when a code template fails to load or render."""

    def __init__(self, message: str, template: str | None = None) -> None:
        self.template = template
        super().__init__(message, template)


class OutputError(Sql2GoError):
    """Raised when the output destination cannot be written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message, path)
