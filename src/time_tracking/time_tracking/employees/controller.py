from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_datetime
from ..common.http import json_body
from ..container import Container
from .model import Employee


def employee_payload(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "first_name": e.first_name,
        "last_name": e.last_name,
        "created_at": format_iso_datetime(e.created_at),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = json_body()
        employee = container.employee_service.create_employee(
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
        )
        return jsonify(employee_payload(employee)), 201

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = container.employee_service.list_employees(request.args.get("search"))
        return jsonify([employee_payload(e) for e in employees])

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        return jsonify(employee_payload(container.employee_service.get_employee(employee_id)))

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        data = json_body()
        employee = container.employee_service.update_employee(
            employee_id,
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
        )
        return jsonify(employee_payload(employee))

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        container.employee_service.delete_employee(employee_id)
        return "", 204
