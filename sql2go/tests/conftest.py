from unittest.mock import MagicMock

import pytest


class FakeConnection:
    """Answers raw SQL from a query -> rows mapping and records what ran."""

    def __init__(self, responses):
        self.responses = responses
        self.queries = []
        self.closed = False

    def exec_driver_sql(self, query):
        self.queries.append(query)
        result = self.responses[query]
        if isinstance(result, Exception):
            raise result
        return iter(result)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False


@pytest.fixture
def fake_database(monkeypatch):
    """Patch create_engine so readers talk to a FakeConnection.

    Returns a function taking the dialect name and the query responses and
    returning ``(engine, connection)``.
    """

    def _install(dialect, responses):
        conn = FakeConnection(responses)
        engine = MagicMock()
        engine.dialect.name = dialect
        engine.connect.return_value = conn
        monkeypatch.setattr(
            "sql2go.schema_reader.base.create_engine",
            lambda url: engine,
        )
        return engine, conn

    return _install


MYSQL_USERS_ORDERS_LOGS = {
    "SHOW TABLES": [("users",), ("orders",), ("logs",)],
    "DESCRIBE users": [
        ("id", "int(11)", "NO", "PRI", None, "auto_increment"),
        ("name", "varchar(50)", "YES", "", None, ""),
    ],
    "DESCRIBE orders": [
        ("id", "bigint(20)", "NO", "PRI", None, "auto_increment"),
        ("placedAt", "datetime", "NO", "", None, ""),
        ("paid", "bit(1)", "NO", "", None, ""),
    ],
    "DESCRIBE logs": [
        ("message", "text", "YES", "", None, ""),
    ],
}


@pytest.fixture
def mysql_schema():
    return dict(MYSQL_USERS_ORDERS_LOGS)
