from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository, MySQLIdentityProvider
from .admins.service import AdminService, AuthService
from .ai.gateway import AIGateway
from .ai.service import AIAssistService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .expenses.mysql_expense_repository import MySQLExpenseRepository
from .expenses.service import ExpenseService
from .payroll.service import PayrollReportService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    admin_service: AdminService
    employee_service: EmployeeService
    payroll_report_service: PayrollReportService
    expense_service: ExpenseService
    task_service: TaskService
    ai_service: AIAssistService


def build_container(*, db_config: dict, ai_gateway: Optional[AIGateway] = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    expenses_repo = MySQLExpenseRepository(conn)
    tasks_repo = MySQLTaskRepository(conn)
    admins_repo = MySQLAdminRepository(conn)
    identities = MySQLIdentityProvider(conn)

    return Container(
        auth_service=AuthService(admins_repo, identities),
        admin_service=AdminService(admins_repo, identities),
        employee_service=EmployeeService(employees_repo),
        payroll_report_service=PayrollReportService(employees_repo, expenses_repo),
        expense_service=ExpenseService(expenses_repo),
        task_service=TaskService(tasks_repo),
        ai_service=AIAssistService(ai_gateway),
    )
