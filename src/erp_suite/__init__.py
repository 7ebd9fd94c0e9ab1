"""ERP Suite package.

Organized by feature modules (employees, payroll, expenses, tasks, admins, ai)
with a thin Flask controller layer over service/repository layers.
"""
