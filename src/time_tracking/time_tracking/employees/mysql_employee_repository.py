from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_duplicate
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, first_name, last_name, created_at"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        created_at=row.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_by_ids(self, employee_ids: Iterable[int]) -> Sequence[Employee]:
        ids = sorted({int(i) for i in employee_ids})
        if not ids:
            return []
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE id IN ({placeholders}) ORDER BY id",
                tuple(ids),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY last_name ASC, first_name ASC, id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def search_by_name(self, term: str) -> Sequence[Employee]:
        pattern = f"%{term.lower()}%"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE LOWER(first_name) LIKE %s OR LOWER(last_name) LIKE %s
                ORDER BY last_name ASC, first_name ASC, id ASC
                """,
                (pattern, pattern),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def exists_by_name(self, first_name: str, last_name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM employees WHERE first_name=%s AND last_name=%s",
                (first_name, last_name),
            )
            return fetchone(cur) is not None

    def create(self, *, first_name: str, last_name: str) -> Employee:
        with translate_duplicate(f"Employee already exists with name: {first_name} {last_name}"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO employees(first_name, last_name) VALUES(%s,%s)",
                    (first_name, last_name),
                )
                new_id = int(cur.lastrowid)
                cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (new_id,))
                return _to_employee(fetchone(cur))

    def update(self, *, employee_id: int, first_name: str, last_name: str) -> Optional[Employee]:
        with translate_duplicate(f"Employee already exists with name: {first_name} {last_name}"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "UPDATE employees SET first_name=%s, last_name=%s WHERE id=%s",
                    (first_name, last_name, int(employee_id)),
                )
                cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
                row = fetchone(cur)
                return _to_employee(row) if row else None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
