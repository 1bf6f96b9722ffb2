"""Example: use the service layer directly (no Flask).

Prints John Doe's timesheet for the seeded day and who is inside at 14:00.
"""

import importlib
from datetime import datetime

from config import get_settings_module

from src.time_tracking.time_tracking.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    sheet = container.timelog_service.calculate_timesheet(
        1, datetime(2024, 12, 8, 0, 0), datetime(2024, 12, 9, 0, 0)
    )
    print(sheet.first_name, sheet.last_name, sheet.total_hours)
    for day in sheet.daily_records:
        print(day.work_date, day.first_entry, day.last_exit, day.hours_worked, day.total_entries)

    presence = container.timelog_service.find_present(datetime(2024, 12, 8, 14, 0))
    print(presence.count, [e.employee_id for e in presence.employees])


if __name__ == "__main__":
    main()
