from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Employee


def _employee_dict(e: Employee) -> dict:
    return {
        "employee_id": e.employee_id,
        "name": e.name,
        "designation": e.designation,
        "salary": e.salary,
        "city": e.city,
        "country": e.country,
        "mobile": e.mobile,
        "attendance": {day: mark.value for day, mark in e.attendance.items()},
        "overtime_hours": dict(e.overtime_hours),
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        return jsonify({"success": True, "employees": [_employee_dict(e) for e in service.list_employees()]})

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        employee_id = service.create_employee(json_body())
        return jsonify({"success": True, "employee_id": employee_id}), 201

    @app.route("/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: str):
        service.update_employee(employee_id, json_body())
        return jsonify({"success": True, "message": "Employee updated"})

    @app.route("/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: str):
        service.delete_employee(employee_id)
        return jsonify({"success": True, "message": "Employee deleted"})

    @app.route("/employees/<employee_id>/attendance/<day>", methods=["PUT"], endpoint="mark_attendance")
    @login_required
    def mark_attendance(employee_id: str, day: str):
        service.mark_attendance(employee_id, day=day, status=json_body().get("status"))
        return jsonify({"success": True, "message": f"Attendance for {day} marked"})

    @app.route("/attendance/<day>", methods=["POST"], endpoint="mark_attendance_bulk")
    @login_required
    def mark_attendance_bulk(day: str):
        data = json_body()
        employee_ids = data.get("employee_ids")
        if employee_ids is not None and not isinstance(employee_ids, list):
            raise ValidationError("employee_ids must be a list of strings")
        count = service.mark_attendance_bulk(day=day, status=data.get("status"), employee_ids=employee_ids)
        return jsonify({"success": True, "updated": count})

    @app.route("/employees/<employee_id>/overtime/<month_key>", methods=["PUT"], endpoint="set_overtime")
    @login_required
    def set_overtime(employee_id: str, month_key: str):
        service.set_overtime_hours(employee_id, key=month_key, hours=json_body().get("hours"))
        return jsonify({"success": True, "message": "Overtime updated"})

    @app.route("/employees/extract", methods=["POST"], endpoint="extract_employees")
    @login_required
    def extract_employees():
        data = json_body()
        drafts = container.ai_service.extract_employees(
            photo_data_uri=data.get("photo_data_uri", ""),
            context=data.get("context"),
        )
        return jsonify({"success": True, "employees": [asdict(d) for d in drafts]})

    @app.route("/employees/import", methods=["POST"], endpoint="import_employees")
    @login_required
    def import_employees():
        employees = json_body().get("employees")
        if not isinstance(employees, list):
            raise ValidationError("employees must be a list")
        ids = service.import_drafts(employees)
        return jsonify({"success": True, "employee_ids": ids}), 201
