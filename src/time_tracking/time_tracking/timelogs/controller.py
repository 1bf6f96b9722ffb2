from __future__ import annotations

import csv
import io
from datetime import datetime

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_datetime, parse_iso_datetime
from ..common.http import json_body
from ..common.validators import require_positive_id
from ..container import Container
from ..employees.controller import employee_payload
from ..timesheet.model import DailySummary, TimesheetSummary
from .model import CheckEvent


def _event_payload(e: CheckEvent) -> dict:
    return {
        "id": e.event_id,
        "employee_id": e.employee_id,
        "check_time": format_iso_datetime(e.check_time),
        "created_at": format_iso_datetime(e.created_at),
    }


def _daily_payload(d: DailySummary) -> dict:
    return {
        "date": d.work_date.isoformat(),
        "hours_worked": d.hours_worked,
        "first_entry": d.first_entry.isoformat() if d.first_entry else None,
        "last_exit": d.last_exit.isoformat() if d.last_exit else None,
        "total_entries": d.total_entries,
    }


def _timesheet_payload(t: TimesheetSummary) -> dict:
    return {
        "employee_id": t.employee_id,
        "first_name": t.first_name,
        "last_name": t.last_name,
        "from": format_iso_datetime(t.date_from),
        "to": format_iso_datetime(t.date_to),
        "total_hours": t.total_hours,
        "daily_records": [_daily_payload(d) for d in t.daily_records],
    }


def _range_args() -> tuple[int, datetime, datetime]:
    employee_id = require_positive_id(request.args.get("employee_id"), "employee_id")
    date_from = parse_iso_datetime(request.args.get("from"), "from")
    date_to = parse_iso_datetime(request.args.get("to"), "to")
    return employee_id, date_from, date_to


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-logs", methods=["POST"], endpoint="create_time_log")
    def create_time_log():
        data = json_body()
        employee_id = require_positive_id(data.get("employee_id"), "employee_id")
        check_time = parse_iso_datetime(data.get("check_time"), "check_time")

        event = container.timelog_service.record_check(employee_id=employee_id, check_time=check_time)
        return jsonify(_event_payload(event)), 201

    @app.route("/api/time-logs", methods=["GET"], endpoint="list_time_logs")
    def list_time_logs():
        employee_id, date_from, date_to = _range_args()
        events = container.timelog_service.get_employee_logs(employee_id, date_from, date_to)
        return jsonify([_event_payload(e) for e in events])

    @app.route("/api/time-logs/<int:log_id>", methods=["DELETE"], endpoint="delete_time_log")
    def delete_time_log(log_id: int):
        container.timelog_service.delete_time_log(log_id)
        return "", 204

    @app.route("/api/time-logs/timesheet", methods=["GET"], endpoint="timesheet")
    def timesheet():
        employee_id, date_from, date_to = _range_args()
        summary = container.timelog_service.calculate_timesheet(employee_id, date_from, date_to)
        return jsonify(_timesheet_payload(summary))

    @app.route("/api/time-logs/timesheet.csv", methods=["GET"], endpoint="timesheet_csv")
    def timesheet_csv():
        employee_id, date_from, date_to = _range_args()
        summary = container.timelog_service.calculate_timesheet(employee_id, date_from, date_to)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "first_entry", "last_exit", "hours_worked", "total_entries"])
        writer.writeheader()
        for d in summary.daily_records:
            writer.writerow(_daily_payload(d))
        writer.writerow({"date": "TOTAL", "hours_worked": summary.total_hours})

        filename = f"timesheet_{employee_id}_{date_from.strftime('%Y%m%d')}_{date_to.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/time-logs/present", methods=["GET"], endpoint="present_employees")
    def present_employees():
        at_time = parse_iso_datetime(request.args.get("time"), "time")
        presence = container.timelog_service.find_present(at_time)
        return jsonify(
            {
                "time": format_iso_datetime(presence.at_time),
                "count": presence.count,
                "employees": [employee_payload(e) for e in presence.employees],
            }
        )

    @app.route("/api/time-logs/present/<int:employee_id>", methods=["GET"], endpoint="employee_presence")
    def employee_presence(employee_id: int):
        at_time = parse_iso_datetime(request.args.get("time"), "time")
        present = container.timelog_service.is_employee_present(employee_id, at_time)
        return jsonify({"employee_id": employee_id, "time": format_iso_datetime(at_time), "present": present})
