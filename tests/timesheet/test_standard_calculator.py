from datetime import date, datetime, timedelta

from src.time_tracking.time_tracking.timesheet.calculator.standard_calculator import StandardWorkedTimeCalculator
from src.time_tracking.time_tracking.timesheet.model import WorkSession


def test_standard_calculator_counts_closed_session():
    session = WorkSession(
        employee_id=1,
        work_date=date(2024, 12, 8),
        check_in=datetime(2024, 12, 8, 9, 0),
        check_out=datetime(2024, 12, 8, 17, 15),
    )

    calc = StandardWorkedTimeCalculator()
    assert calc.worked(session) == timedelta(hours=8, minutes=15)


def test_standard_calculator_ignores_open_session():
    session = WorkSession(employee_id=1, work_date=date(2024, 12, 8), check_in=datetime(2024, 12, 8, 9, 0))

    calc = StandardWorkedTimeCalculator()
    assert calc.worked(session) is None
    assert not session.is_closed
