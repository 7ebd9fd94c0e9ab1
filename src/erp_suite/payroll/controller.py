from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..common.web import csv_response, int_arg, login_required
from ..container import Container
from .export import attendance_report_csv, payroll_csv
from .model import MonthlyPayrollReport, PayPeriod


def register(app: Flask, container: Container) -> None:
    reports = container.payroll_report_service

    def _selected_period() -> PayPeriod:
        today = now_local().date()
        return PayPeriod(int_arg("year", today.year), int_arg("month", today.month))

    def _report_json(report: MonthlyPayrollReport) -> dict:
        return {
            "success": report.fetch_error is None,
            "message": report.fetch_error,
            "period": {"year": report.period.year, "month": report.period.month, "label": report.period.label},
            "rows": [r.as_dict() for r in report.rows],
            "total_monthly_payroll": round(report.total_monthly_payroll, 2),
        }

    @app.route("/payroll", methods=["GET"], endpoint="payroll")
    @login_required
    def payroll():
        return jsonify(_report_json(reports.build_monthly_report(_selected_period())))

    @app.route("/payroll/export", methods=["GET"], endpoint="payroll_export")
    @login_required
    def payroll_export():
        report = reports.build_monthly_report(_selected_period())
        filename = f"Payroll_{report.period.label.replace(' ', '_')}.csv"
        return csv_response(app, payroll_csv(report), filename=filename)

    @app.route("/reports/attendance/export", methods=["GET"], endpoint="attendance_report_export")
    @login_required
    def attendance_report_export():
        report = reports.build_monthly_report(_selected_period())
        filename = f"Attendance_Report_{report.period.label.replace(' ', '_')}.csv"
        return csv_response(app, attendance_report_csv(report), filename=filename)

    @app.route("/payroll/summary", methods=["POST"], endpoint="payroll_summary")
    @login_required
    def payroll_summary():
        report = reports.build_monthly_report(_selected_period())
        summary = container.ai_service.summarize_payroll(report)
        return jsonify({"success": True, "summary": summary})

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        summary = reports.build_dashboard(now_local().date())
        return jsonify(
            {
                "success": not summary.errors,
                "errors": summary.errors,
                "employee_count": summary.employee_count,
                "current_month_payroll": round(summary.current_month_payroll, 2),
                "current_month_expenses": round(summary.current_month_expenses, 2),
                "trend": [asdict(p) for p in summary.trend],
            }
        )
