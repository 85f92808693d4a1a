"""Backend independent part of reading table schemas from a live database."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, ClassVar, Iterator, Sequence

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from ..shared import (
    Column,
    DatabaseConnectionError,
    QueryError,
    RowScanError,
    Table,
    row_type_for,
    split_table_filter,
    upper_first,
)
from .types import go_type


class SchemaReader(ABC):
    """Reads tables and their columns from one kind of database.

    Subclasses supply the backend specific queries; connection handling,
    row decoding and type mapping live here.
    """

    #: Driver name selecting this reader on the command line
    driver: ClassVar[str]
    #: SQLAlchemy dialect name the connection string must resolve to
    dialect: ClassVar[str]
    #: Connection URL form using the DBAPI driver this project installs
    url_example: ClassVar[str]

    def __init__(
        self,
        conn_str: str,
        export_fields: bool = True,
        db_interface: bool = False,
    ) -> None:
        self.conn_str = conn_str
        self.export_fields = export_fields
        self.db_interface = db_interface

    def read_tables_schema(
        self,
        database: str,
        tables: str | None = None,
    ) -> list[Table]:
        """Read the schema of every table in a database.

        Args:
            database: Database (catalog) name.
            tables: Optional comma separated allow-list of table names.

        Returns:
            Tables in the order the database listed them, each with its
            columns in the order the database reported them.

        Raises:
            Sql2GoError: On the first connection, query, decoding or type
                mapping failure. No partial result is returned.
        """
        wanted = split_table_filter(tables)
        row_type = row_type_for(self.db_interface)

        with self._connect() as conn:
            names = self._list_tables(conn, database, wanted)
            return [
                Table(
                    name=name,
                    columns=self._read_columns_schema(conn, database, name),
                    row_type=row_type,
                )
                for name in names
            ]

    @abstractmethod
    def _list_tables(
        self,
        conn: Connection,
        database: str,
        wanted: Sequence[str],
    ) -> list[str]:
        """Return table names in listing order, restricted to ``wanted`` if given."""

    @abstractmethod
    def _columns_query(self, database: str, table: str) -> str:
        """Return a query yielding ``(name, native type, ...)`` per column."""

    def _read_columns_schema(
        self,
        conn: Connection,
        database: str,
        table: str,
    ) -> tuple[Column, ...]:
        query = self._columns_query(database, table)
        columns: list[Column] = []
        for row in self._query(conn, query):
            name = self._text(row, 0, query)
            native_type = self._text(row, 1, query)
            columns.append(self._build_column(table, name, native_type))
        return tuple(columns)

    def _build_column(self, table: str, name: str, native_type: str) -> Column:
        """Map a native column to its Go field name and type."""
        mapped = go_type(native_type, name, table)
        if self.export_fields:
            name = upper_first(name)
        return Column(name=name, type=mapped)

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        """Open one connection, releasing it and its engine on exit."""
        try:
            engine = create_engine(self.conn_str)
        except ImportError as e:
            raise DatabaseConnectionError(
                f"Missing database driver: {e} (use a URL like {self.url_example})",
                self.driver,
            ) from e
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(
                f"Invalid connection string: {e}", self.driver
            ) from e

        try:
            if engine.dialect.name != self.dialect:
                raise DatabaseConnectionError(
                    f"connection string is for '{engine.dialect.name}', "
                    f"expected '{self.dialect}'",
                    self.driver,
                )
            try:
                conn = engine.connect()
            except SQLAlchemyError as e:
                raise DatabaseConnectionError(
                    f"Failed to connect: {e}", self.driver
                ) from e
            with conn:
                yield conn
        finally:
            engine.dispose()

    @staticmethod
    def _query(conn: Connection, query: str) -> list[Sequence[Any]]:
        """Execute raw SQL and fetch every row."""
        try:
            result = conn.exec_driver_sql(query)
            return [tuple(row) for row in result]
        except SQLAlchemyError as e:
            raise QueryError(query, str(e)) from e

    @staticmethod
    def _text(row: Sequence[Any], index: int, query: str) -> str:
        """Decode one text field of a result row."""
        if len(row) <= index:
            raise RowScanError(
                f"expected at least {index + 1} field(s), got {len(row)}", query
            )
        value = row[index]
        # Some MySQL drivers return DESCRIBE output as bytes
        if isinstance(value, (bytes, bytearray)):
            try:
                return bytes(value).decode("utf-8")
            except UnicodeDecodeError as e:
                raise RowScanError(f"field {index} is not valid UTF-8", query) from e
        if not isinstance(value, str):
            raise RowScanError(
                f"field {index} is {type(value).__name__}, expected text", query
            )
        return value
