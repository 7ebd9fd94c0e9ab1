from __future__ import annotations

from dataclasses import replace

import pytest
from werkzeug.security import check_password_hash, generate_password_hash

from erp_suite.admins.model import Admin, Identity
from erp_suite.admins.service import AdminService, AuthService
from erp_suite.ai.service import AIAssistService
from erp_suite.container import Container
from erp_suite.core.exceptions import StoreError
from erp_suite.employees.model import Employee
from erp_suite.employees.service import EmployeeService
from erp_suite.expenses.service import ExpenseService
from erp_suite.main import create_app
from erp_suite.payroll.service import PayrollReportService
from erp_suite.tasks.service import TaskService


class FakeEmployeeRepo:
    def __init__(self):
        self.rows: dict[str, Employee] = {}
        self.fail = False

    def list_all(self):
        if self.fail:
            raise StoreError("connection refused")
        return list(self.rows.values())

    def get_by_id(self, employee_id):
        return self.rows.get(employee_id)

    def create(self, draft):
        if self.fail:
            raise StoreError("connection refused")
        employee_id = f"EMP{len(self.rows) + 1:03d}"
        self.rows[employee_id] = Employee(employee_id=employee_id, **draft.__dict__)
        return employee_id

    def set_attendance(self, employee_id, day, status):
        e = self.rows[employee_id]
        self.rows[employee_id] = replace(e, attendance={**e.attendance, day.strftime("%Y-%m-%d"): status})

    def set_overtime(self, employee_id, month_key, hours):
        e = self.rows[employee_id]
        self.rows[employee_id] = replace(e, overtime_hours={**e.overtime_hours, month_key: hours})


class FakeExpenseRepo:
    def list_between(self, start, end):
        return []


class FakeTaskRepo:
    def list_all(self, *, status=None):
        return []


class FakeAdminRepo:
    def __init__(self):
        self.rows = {"A1": Admin(admin_id="A1", email="admin@example.com")}

    def get_by_email(self, email):
        return next((a for a in self.rows.values() if a.email == email), None)


class FakeIdentityProvider:
    def __init__(self):
        self.identity = Identity(uid="U1", email="admin@example.com", password_hash=generate_password_hash("admin12345"))

    def verify_password(self, *, email, password):
        return email == self.identity.email and check_password_hash(self.identity.password_hash, password)


@pytest.fixture()
def employees_repo():
    return FakeEmployeeRepo()


@pytest.fixture()
def admins_repo():
    return FakeAdminRepo()


@pytest.fixture()
def client(monkeypatch, employees_repo, admins_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    admins, identities = admins_repo, FakeIdentityProvider()
    container = Container(
        auth_service=AuthService(admins, identities),
        admin_service=AdminService(admins, identities),
        employee_service=EmployeeService(employees_repo),
        payroll_report_service=PayrollReportService(employees_repo, FakeExpenseRepo()),
        expense_service=ExpenseService(FakeExpenseRepo()),
        task_service=TaskService(FakeTaskRepo()),
        ai_service=AIAssistService(),
    )
    app = create_app(container=container)
    return app.test_client()


def _login(client):
    resp = client.post("/login", json={"email": "admin@example.com", "password": "admin12345"})
    assert resp.status_code == 200


def test_routes_require_login(client):
    resp = client.get("/payroll?year=2024&month=7")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_wrong_password_is_rejected(client):
    resp = client.post("/login", json={"email": "admin@example.com", "password": "nope"})

    assert resp.status_code == 401


def test_attendance_and_overtime_flow_into_payroll(client):
    _login(client)
    resp = client.post(
        "/employees",
        json={"name": "John Doe", "designation": "Project Manager", "salary": 15000, "country": "UAE"},
    )
    employee_id = resp.get_json()["employee_id"]

    for day in range(1, 21):
        resp = client.put(f"/employees/{employee_id}/attendance/2024-07-{day:02d}", json={"status": "present"})
        assert resp.status_code == 200
    assert client.put(f"/employees/{employee_id}/overtime/2024-07", json={"hours": 10}).status_code == 200

    data = client.get("/payroll?year=2024&month=7").get_json()

    assert data["success"] is True
    assert data["rows"][0]["total_present"] == 20
    assert data["rows"][0]["base_calculated_salary"] == 9677.42
    assert data["rows"][0]["overtime_pay"] == 1278.41
    assert data["total_monthly_payroll"] == 10955.83

    export = client.get("/payroll/export?year=2024&month=7")
    assert export.status_code == 200
    assert export.mimetype == "text/csv"
    assert export.data.decode("utf-8-sig").splitlines()[1] == '"John Doe",20,1278.41,15000.00,10955.83'


def test_validation_errors_are_400(client):
    _login(client)

    assert client.get("/payroll?year=2024&month=13").status_code == 400
    assert client.post("/employees", json={"name": "J", "salary": 0}).status_code == 400
    assert client.put("/employees/EMP404/overtime/2024-07", json={"hours": -3}).status_code == 400


def test_empty_roster_export_reports_no_data(client):
    _login(client)

    resp = client.get("/payroll/export?year=2024&month=7")

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "No payroll data to export"


def test_roster_failure_is_surfaced_not_raised(client, employees_repo):
    _login(client)
    employees_repo.fail = True

    data = client.get("/payroll?year=2024&month=7").get_json()

    assert data["success"] is False
    assert data["message"] == "Could not load employees"
    assert data["rows"] == []
    assert data["total_monthly_payroll"] == 0


def test_store_failure_on_write_is_503(client, employees_repo):
    _login(client)
    employees_repo.fail = True

    resp = client.post(
        "/employees",
        json={"name": "John Doe", "designation": "Project Manager", "salary": 15000, "country": "UAE"},
    )

    assert resp.status_code == 503


def test_ai_helpers_report_missing_gateway(client):
    _login(client)

    resp = client.post("/employees/extract", json={"photo_data_uri": "data:image/png;base64,AAAA"})

    assert resp.status_code == 502
    assert resp.get_json()["message"] == "AI assistant is not configured"


@pytest.mark.parametrize("employee_ids", [[1], [["EMP001"]], [None]])
def test_bulk_attendance_rejects_non_string_ids(client, employee_ids):
    _login(client)

    resp = client.post("/attendance/2024-07-01", json={"status": "present", "employee_ids": employee_ids})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "employee_ids must be a list of strings"


def test_infinite_salary_is_a_validation_error(client):
    _login(client)

    resp = client.post(
        "/employees",
        data='{"name": "John Doe", "designation": "Project Manager", "salary": Infinity, "country": "UAE"}',
        content_type="application/json",
    )

    assert resp.status_code == 400


def test_identity_without_admin_record_is_forbidden(client, admins_repo):
    admins_repo.rows.clear()

    resp = client.post("/login", json={"email": "admin@example.com", "password": "admin12345"})

    assert resp.status_code == 403
    assert resp.get_json()["message"] == "This account is not an admin"
