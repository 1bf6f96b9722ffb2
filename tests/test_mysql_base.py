from __future__ import annotations

from datetime import datetime

import mysql.connector
import pytest

from src.time_tracking.time_tracking.container import build_container
from src.time_tracking.time_tracking.core.exceptions import ConflictError
from src.time_tracking.time_tracking.database.connection import DBConfig
from src.time_tracking.time_tracking.database.mysql_base import db_cursor, translate_duplicate
from src.time_tracking.time_tracking.timelogs.mysql_timelog_repository import MySQLEventStore


class FakeCursor:
    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.executed = []
        self.lastrowid = 7
        self.rowcount = 0
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, rows=None):
        self.cursor = FakeCursor(rows)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


def test_db_cursor_commits_and_closes():
    factory = FakeFactory()
    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    assert factory.conn.committed
    assert not factory.conn.rolled_back
    assert factory.cursor.closed
    assert factory.conn.closed


def test_db_cursor_rolls_back_on_error():
    factory = FakeFactory()
    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed


def test_translate_duplicate_maps_duplicate_key():
    with pytest.raises(ConflictError, match="already exists"):
        with translate_duplicate("already exists"):
            raise mysql.connector.IntegrityError(msg="Duplicate entry", errno=1062)


def test_translate_duplicate_keeps_other_integrity_errors():
    with pytest.raises(mysql.connector.IntegrityError):
        with translate_duplicate("already exists"):
            raise mysql.connector.IntegrityError(msg="FK violation", errno=1452)


def test_event_store_create_reads_back_inserted_row():
    row = {"id": 7, "employee_id": 1, "check_time": datetime(2024, 12, 8, 9, 0), "created_at": None}
    factory = FakeFactory(rows=[row])

    event = MySQLEventStore(factory).create(employee_id=1, check_time=datetime(2024, 12, 8, 9, 0))

    assert event.event_id == 7
    assert event.check_time == datetime(2024, 12, 8, 9, 0)
    insert_sql, insert_params = factory.cursor.executed[0]
    assert insert_sql.startswith("INSERT INTO time_logs")
    assert insert_params == (1, datetime(2024, 12, 8, 9, 0))


def test_event_store_range_query_is_half_open():
    factory = FakeFactory(rows=[])
    d_from, d_to = datetime(2024, 12, 8), datetime(2024, 12, 9)

    assert MySQLEventStore(factory).fetch_for_employee(1, d_from, d_to) == []

    sql, params = factory.cursor.executed[0]
    assert "check_time >= %s AND check_time < %s" in sql
    assert sql.endswith("ORDER BY check_time ASC")
    assert params == (1, d_from, d_to)


def test_bulk_presence_query_orders_by_employee_then_time():
    factory = FakeFactory(rows=[])
    at = datetime(2024, 12, 8, 14, 0)

    MySQLEventStore(factory).fetch_all_up_to_time(at)

    sql, params = factory.cursor.executed[0]
    assert "check_time <= %s" in sql
    assert sql.endswith("ORDER BY employee_id ASC, check_time ASC")
    assert params == (at,)


def test_db_config_label_hides_password():
    cfg = DBConfig.from_dict({"host": "db", "user": "app", "password": "secret", "database": "tt"})

    assert cfg.port == 3306
    assert cfg.label == "app@db:3306/tt"
    assert "secret" not in cfg.label


def test_each_container_gets_its_own_connection_factory():
    first = build_container(db_config={"host": "a", "database": "one"})
    second = build_container(db_config={"host": "b", "database": "two"})

    assert first.conn is not second.conn
    assert first.conn.config.label == "root@a:3306/one"
    assert second.conn.config.label == "root@b:3306/two"
    assert first.events_repo._conn_factory is first.conn
