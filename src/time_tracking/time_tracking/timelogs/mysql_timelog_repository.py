from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_duplicate
from .model import CheckEvent
from .repository import EventStore

_COLUMNS = "id, employee_id, check_time, created_at"


def _to_event(row: dict) -> CheckEvent:
    return CheckEvent(
        event_id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        check_time=row["check_time"],
        created_at=row.get("created_at"),
    )


class MySQLEventStore(EventStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_id: int, check_time: datetime) -> CheckEvent:
        message = f"Time log already exists for employee {employee_id} at {check_time.isoformat()}"
        with translate_duplicate(message):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO time_logs(employee_id, check_time) VALUES(%s,%s)",
                    (int(employee_id), check_time),
                )
                new_id = int(cur.lastrowid)
                cur.execute(f"SELECT {_COLUMNS} FROM time_logs WHERE id=%s", (new_id,))
                return _to_event(fetchone(cur))

    def get_by_id(self, event_id: int) -> Optional[CheckEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_logs WHERE id=%s", (int(event_id),))
            row = fetchone(cur)
            return _to_event(row) if row else None

    def delete_by_id(self, event_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_logs WHERE id=%s", (int(event_id),))
            return cur.rowcount > 0

    def fetch_for_employee(self, employee_id: int, date_from: datetime, date_to: datetime) -> Sequence[CheckEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_logs
                WHERE employee_id=%s AND check_time >= %s AND check_time < %s
                ORDER BY check_time ASC
                """,
                (int(employee_id), date_from, date_to),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def fetch_all_up_to_time(self, at_time: datetime) -> Sequence[CheckEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_logs
                WHERE check_time <= %s
                ORDER BY employee_id ASC, check_time ASC
                """,
                (at_time,),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def fetch_employee_history(self, employee_id: int, at_time: datetime) -> Sequence[CheckEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_logs
                WHERE employee_id=%s AND check_time <= %s
                ORDER BY check_time ASC
                """,
                (int(employee_id), at_time),
            )
            return [_to_event(r) for r in fetchall(cur)]
