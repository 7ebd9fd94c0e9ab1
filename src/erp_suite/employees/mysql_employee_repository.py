from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceMark
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = "employee_id, name, designation, salary, city, country, mobile"


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_employee(row: dict, attendance: dict, overtime: dict) -> Employee:
        return Employee(
            employee_id=row["employee_id"],
            name=row["name"],
            designation=row["designation"],
            salary=float(row["salary"]),
            city=row.get("city"),
            country=row["country"],
            mobile=row.get("mobile"),
            attendance=attendance,
            overtime_hours=overtime,
        )

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees ORDER BY name")
            rows = fetchall(cur)
            cur.execute("SELECT employee_id, work_date, status FROM employee_attendance")
            marks = fetchall(cur)
            cur.execute("SELECT employee_id, month_key, hours FROM employee_overtime")
            overtime_rows = fetchall(cur)

        attendance: dict[str, dict[str, AttendanceMark]] = {}
        for m in marks:
            day = normalize_mysql_date(m["work_date"]).strftime("%Y-%m-%d")
            attendance.setdefault(m["employee_id"], {})[day] = AttendanceMark(m["status"])

        overtime: dict[str, dict[str, float]] = {}
        for o in overtime_rows:
            overtime.setdefault(o["employee_id"], {})[o["month_key"]] = float(o["hours"])

        return [
            self._to_employee(r, attendance.get(r["employee_id"], {}), overtime.get(r["employee_id"], {}))
            for r in rows
        ]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            if not row:
                return None
            cur.execute("SELECT work_date, status FROM employee_attendance WHERE employee_id=%s", (employee_id,))
            marks = fetchall(cur)
            cur.execute("SELECT month_key, hours FROM employee_overtime WHERE employee_id=%s", (employee_id,))
            overtime_rows = fetchall(cur)

        attendance = {
            normalize_mysql_date(m["work_date"]).strftime("%Y-%m-%d"): AttendanceMark(m["status"]) for m in marks
        }
        overtime = {o["month_key"]: float(o["hours"]) for o in overtime_rows}
        return self._to_employee(row, attendance, overtime)

    def create(self, draft: EmployeeDraft) -> str:
        employee_id = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, designation, salary, city, country, mobile)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, draft.name, draft.designation, draft.salary, draft.city, draft.country, draft.mobile),
            )
        return employee_id

    def update_profile(self, employee_id: str, draft: EmployeeDraft) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, designation=%s, salary=%s, city=%s, country=%s, mobile=%s
                WHERE employee_id=%s
                """,
                (draft.name, draft.designation, draft.salary, draft.city, draft.country, draft.mobile, employee_id),
            )
            # rowcount is 0 when nothing changed, so check existence separately.
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0

    def set_attendance(self, employee_id: str, day: date, status: AttendanceMark) -> None:
        self.set_attendance_bulk([employee_id], day, status)

    def set_attendance_bulk(self, employee_ids: Sequence[str], day: date, status: AttendanceMark) -> None:
        if not employee_ids:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO employee_attendance(employee_id, work_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                [(employee_id, day, status.value) for employee_id in employee_ids],
            )

    def set_overtime(self, employee_id: str, month_key: str, hours: float) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_overtime(employee_id, month_key, hours)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE hours=VALUES(hours)
                """,
                (employee_id, month_key, hours),
            )
