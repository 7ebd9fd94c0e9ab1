from __future__ import annotations

from dataclasses import replace

import pytest

from erp_suite.core.enums import AttendanceMark
from erp_suite.core.exceptions import NotFoundError, ValidationError
from erp_suite.employees.model import Employee
from erp_suite.employees.service import EmployeeService


class FakeEmployeeRepo:
    def __init__(self):
        self._next_id = 1
        self._rows: dict[str, Employee] = {}
        self.bulk_calls = []

    def list_all(self):
        return list(self._rows.values())

    def get_by_id(self, employee_id):
        return self._rows.get(employee_id)

    def create(self, draft):
        employee_id = f"EMP{self._next_id:03d}"
        self._next_id += 1
        self._rows[employee_id] = Employee(employee_id=employee_id, **draft.__dict__)
        return employee_id

    def update_profile(self, employee_id, draft):
        current = self._rows.get(employee_id)
        if not current:
            return False
        self._rows[employee_id] = replace(current, **draft.__dict__)
        return True

    def delete_by_id(self, employee_id):
        return self._rows.pop(employee_id, None) is not None

    def set_attendance(self, employee_id, day, status):
        self.set_attendance_bulk([employee_id], day, status)

    def set_attendance_bulk(self, employee_ids, day, status):
        self.bulk_calls.append((list(employee_ids), day, status))
        for employee_id in employee_ids:
            e = self._rows[employee_id]
            attendance = dict(e.attendance)
            attendance[day.strftime("%Y-%m-%d")] = status
            self._rows[employee_id] = replace(e, attendance=attendance)

    def set_overtime(self, employee_id, month_key, hours):
        e = self._rows[employee_id]
        overtime = dict(e.overtime_hours)
        overtime[month_key] = hours
        self._rows[employee_id] = replace(e, overtime_hours=overtime)


def _valid(**overrides):
    data = {"name": "John Doe", "designation": "Project Manager", "salary": "15000", "country": "UAE", "city": "Dubai"}
    data.update(overrides)
    return data


def test_create_employee_validates_and_coerces_salary():
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)

    employee_id = svc.create_employee(_valid(mobile="  "))

    e = repo.get_by_id(employee_id)
    assert e.salary == 15000.0
    assert e.city == "Dubai"
    assert e.mobile is None
    assert e.attendance == {}


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "J"},
        {"designation": ""},
        {"salary": 0},
        {"salary": -100},
        {"salary": "abc"},
        {"country": None},
    ],
)
def test_create_employee_rejects_invalid_fields(overrides):
    repo = FakeEmployeeRepo()

    with pytest.raises(ValidationError):
        EmployeeService(repo).create_employee(_valid(**overrides))

    assert repo.list_all() == []


def test_mark_attendance_is_idempotent_per_day():
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)
    employee_id = svc.create_employee(_valid())

    svc.mark_attendance(employee_id, day="2024-07-01", status="present")
    svc.mark_attendance(employee_id, day="2024-07-01", status="present")

    assert repo.get_by_id(employee_id).attendance == {"2024-07-01": AttendanceMark.PRESENT}


def test_mark_attendance_rejects_unknown_status_and_bad_date():
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)
    employee_id = svc.create_employee(_valid())

    with pytest.raises(ValidationError):
        svc.mark_attendance(employee_id, day="2024-07-01", status="late")
    with pytest.raises(ValidationError):
        svc.mark_attendance(employee_id, day="07/01/2024", status="present")
    with pytest.raises(NotFoundError):
        svc.mark_attendance("missing", day="2024-07-01", status="present")


def test_bulk_attendance_defaults_to_every_employee_in_one_write():
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)
    a = svc.create_employee(_valid())
    b = svc.create_employee(_valid(name="Jane Smith"))

    count = svc.mark_attendance_bulk(day="2024-07-02", status="leave")

    assert count == 2
    assert len(repo.bulk_calls) == 1
    assert repo.get_by_id(a).attendance["2024-07-02"] == AttendanceMark.LEAVE
    assert repo.get_by_id(b).attendance["2024-07-02"] == AttendanceMark.LEAVE


def test_bulk_attendance_rejects_unknown_ids_before_writing():
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)
    a = svc.create_employee(_valid())

    with pytest.raises(NotFoundError):
        svc.mark_attendance_bulk(day="2024-07-02", status="present", employee_ids=[a, "ghost"])

    assert repo.bulk_calls == []


def test_set_overtime_normalises_key_and_rejects_negative_hours():
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)
    employee_id = svc.create_employee(_valid())

    svc.set_overtime_hours(employee_id, key="2024-7", hours="12.5")

    assert repo.get_by_id(employee_id).overtime_hours == {"2024-07": 12.5}
    with pytest.raises(ValidationError):
        svc.set_overtime_hours(employee_id, key="2024-07", hours=-1)
    with pytest.raises(ValidationError):
        svc.set_overtime_hours(employee_id, key="July", hours=1)


@pytest.mark.parametrize("value", ["inf", "Infinity", float("inf"), float("nan")])
def test_non_finite_salary_and_overtime_are_rejected(value):
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)
    employee_id = svc.create_employee(_valid())

    with pytest.raises(ValidationError):
        svc.create_employee(_valid(salary=value))
    with pytest.raises(ValidationError):
        svc.set_overtime_hours(employee_id, key="2024-07", hours=value)

    assert len(repo.list_all()) == 1
    assert repo.get_by_id(employee_id).overtime_hours == {}


def test_import_drafts_is_all_or_nothing():
    repo = FakeEmployeeRepo()
    svc = EmployeeService(repo)

    with pytest.raises(ValidationError):
        svc.import_drafts([_valid(), _valid(salary=0)])
    assert repo.list_all() == []

    ids = svc.import_drafts([_valid(), _valid(name="Jane Smith")])
    assert len(ids) == 2


def test_update_and_delete_unknown_employee():
    svc = EmployeeService(FakeEmployeeRepo())

    with pytest.raises(NotFoundError):
        svc.update_employee("missing", _valid())
    with pytest.raises(NotFoundError):
        svc.delete_employee("missing")
