from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import csv_response, int_arg, json_body, login_required
from ..container import Container
from .service import expenses_csv


def register(app: Flask, container: Container) -> None:
    service = container.expense_service

    def _filtered():
        """?date=YYYY-MM-DD for one day, ?year=&month= for a month, otherwise everything."""

        day = request.args.get("date")
        if day:
            return service.list_for_day(day), f"expenses_{day}.csv"
        if request.args.get("month"):
            year, month = int_arg("year"), int_arg("month")
            return service.list_for_month(year, month), f"expenses_{year:04d}-{month:02d}.csv"
        return service.list_all(), "expenses_all.csv"

    @app.route("/expenses", methods=["GET"], endpoint="list_expenses")
    @login_required
    def list_expenses():
        expenses, _ = _filtered()
        return jsonify(
            {
                "success": True,
                "expenses": [x.as_dict() for x in expenses],
                "total": round(sum(x.cost for x in expenses), 2),
            }
        )

    @app.route("/expenses", methods=["POST"], endpoint="add_expense")
    @login_required
    def add_expense():
        expense_id = service.add_expense(json_body())
        return jsonify({"success": True, "expense_id": expense_id, "message": "New expense has been added"}), 201

    @app.route("/expenses/<expense_id>", methods=["PUT"], endpoint="update_expense")
    @login_required
    def update_expense(expense_id: str):
        service.update_expense(expense_id, json_body())
        return jsonify({"success": True, "message": "Expense has been updated"})

    @app.route("/expenses/<expense_id>", methods=["DELETE"], endpoint="delete_expense")
    @login_required
    def delete_expense(expense_id: str):
        service.delete_expense(expense_id)
        return jsonify({"success": True, "message": "Expense has been deleted"})

    @app.route("/expenses/export", methods=["GET"], endpoint="export_expenses")
    @login_required
    def export_expenses():
        expenses, filename = _filtered()
        return csv_response(app, expenses_csv(expenses), filename=filename)
