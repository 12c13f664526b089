from __future__ import annotations

import json

import pytest

from src.attendance_guard.attendance_guard.semester.model import SemesterSettings
from src.attendance_guard.attendance_guard.snapshots.model import UserSnapshot
from src.attendance_guard.attendance_guard.snapshots.mysql_snapshot_repository import MySQLSnapshotRepository


class FakeCursor:
    def __init__(self, table: dict[int, str], fail: bool = False):
        self._table = table
        self._fail = fail
        self._row = None
        self.closed = False

    def execute(self, sql: str, params: tuple) -> None:
        if self._fail:
            raise RuntimeError("boom")
        if sql.lstrip().startswith("SELECT"):
            payload = self._table.get(params[0])
            self._row = {"payload": payload} if payload is not None else None
        else:
            self._table[params[0]] = params[1]

    def fetchone(self):
        return self._row

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, table: dict[int, str], fail: bool = False):
        self.cursor_obj = FakeCursor(table, fail)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = True):
        return self.cursor_obj

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True

    def close(self) -> None:
        self.closed = True


class FakeConnFactory:
    def __init__(self, fail: bool = False):
        self.table: dict[int, str] = {}
        self.fail = fail
        self.connections: list[FakeConnection] = []

    def connect(self):
        conn = FakeConnection(self.table, self.fail)
        self.connections.append(conn)
        return conn


def test_save_then_get_roundtrips_json_document():
    factory = FakeConnFactory()
    repo = MySQLSnapshotRepository(factory)
    snap = UserSnapshot(settings=SemesterSettings(course_name="B.Tech", subjects=("Math",)), holidays=("2024-01-26",))

    repo.save(7, snap)

    assert json.loads(factory.table[7])["settings"]["subjects"] == ["Math"]
    assert repo.get(7) == snap
    assert all(c.committed and c.closed for c in factory.connections)


def test_get_missing_user_returns_none():
    assert MySQLSnapshotRepository(FakeConnFactory()).get(1) is None


def test_errors_roll_back_and_propagate():
    factory = FakeConnFactory(fail=True)

    with pytest.raises(RuntimeError):
        MySQLSnapshotRepository(factory).save(1, UserSnapshot.empty())

    conn = factory.connections[0]
    assert conn.rolled_back and conn.closed and not conn.committed
    assert conn.cursor_obj.closed
