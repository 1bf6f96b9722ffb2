from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .timelogs.mysql_timelog_repository import MySQLEventStore
from .timelogs.service import TimeLogService
from .timesheet.calculator.standard_calculator import StandardWorkedTimeCalculator


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    events_repo: MySQLEventStore

    employee_service: EmployeeService
    timelog_service: TimeLogService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    events_repo = MySQLEventStore(conn)

    employee_service = EmployeeService(employees_repo)
    timelog_service = TimeLogService(
        events_repo,
        employees_repo,
        calculator=StandardWorkedTimeCalculator(),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        events_repo=events_repo,
        employee_service=employee_service,
        timelog_service=timelog_service,
    )
