"""Scriptable stand-ins for mysql-connector pool/connection/cursor objects.

They record every call so tests can check commit/rollback/release ordering
without a MySQL server.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from src.lecture_attendance.lecture_attendance.database.connection import ConnectionPool, DBConfig


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self._conn = conn
        self.rowcount = -1
        self.lastrowid = None
        self._rows: list[Any] = []

    def execute(self, sql: str, params: tuple = ()) -> None:
        self._conn.events.append("execute")
        self._conn.statements.append((" ".join(sql.split()), tuple(params)))
        outcome = self._conn.script.pop(0) if self._conn.script else {}
        if isinstance(outcome, Exception):
            raise outcome
        self.rowcount = outcome.get("rowcount", 0)
        self.lastrowid = outcome.get("lastrowid")
        self._rows = list(outcome.get("rows", []))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self) -> None:
        self._conn.events.append("cursor.close")


class FakeConnection:
    def __init__(self, script: Optional[list] = None):
        self.script = list(script or [])
        self.events: list[str] = []
        self.statements: list[tuple[str, tuple]] = []

    def cursor(self, dictionary: bool = False) -> FakeCursor:
        self.events.append("cursor")
        return FakeCursor(self)

    def start_transaction(self) -> None:
        self.events.append("start_transaction")

    def commit(self) -> None:
        self.events.append("commit")

    def rollback(self) -> None:
        self.events.append("rollback")

    def close(self) -> None:
        self.events.append("release")


class FakeMySQLPool:
    def __init__(self, connection_factory: Callable[[], FakeConnection]):
        self._connection_factory = connection_factory
        self.handed_out: list[FakeConnection] = []

    def get_connection(self) -> FakeConnection:
        conn = self._connection_factory()
        self.handed_out.append(conn)
        return conn


def make_pool(*connections: FakeConnection, pool_size: int = 2, acquire_timeout: float = 0.2) -> ConnectionPool:
    queue = list(connections)
    fake = FakeMySQLPool(lambda: queue.pop(0) if queue else FakeConnection())
    config = DBConfig(
        host="db.test",
        port=3306,
        user="tester",
        password="",
        database="attendance_test",
        pool_size=pool_size,
        acquire_timeout=acquire_timeout,
    )
    return ConnectionPool(config, pool_factory=lambda _cfg: fake)
