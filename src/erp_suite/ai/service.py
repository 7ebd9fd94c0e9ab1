from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping, Optional

from ..core.exceptions import AIAssistError, ValidationError
from ..common.datetime_utils import month_name
from ..employees.model import EmployeeDraft
from ..employees.service import build_employee_draft
from ..payroll.model import MonthlyPayrollReport
from .gateway import AIGateway

logger = logging.getLogger(__name__)

_DATA_URI_RE = re.compile(r"^data:[\w.+-]+/[\w.+-]+;base64,[A-Za-z0-9+/=\s]+$")


class AIAssistService:
    """Use case: AI-assisted employee entry and payroll summary.

    Gateway output is either applied whole or rejected as one failure.
    """

    def __init__(self, gateway: Optional[AIGateway] = None):
        self._gateway = gateway

    def _require_gateway(self) -> AIGateway:
        if self._gateway is None:
            raise AIAssistError("AI assistant is not configured")
        return self._gateway

    def extract_employees(self, *, photo_data_uri: str, context: Optional[str] = None) -> list[EmployeeDraft]:
        if not photo_data_uri or not _DATA_URI_RE.match(photo_data_uri):
            raise ValidationError("An image is required as a base64 data URI")

        gateway = self._require_gateway()
        try:
            records = gateway.extract_employee_info(photo_data_uri=photo_data_uri, context=context or "")
        except Exception as e:
            logger.exception("AI extraction call failed")
            raise AIAssistError(f"AI extraction failed: {e}") from e

        if isinstance(records, Mapping):
            records = [records]
        if not records:
            raise AIAssistError("AI extraction returned no employees")

        drafts = []
        for record in records:
            drafts.append(self._to_draft(record))
        return drafts

    @staticmethod
    def _to_draft(record: Any) -> EmployeeDraft:
        if not isinstance(record, Mapping):
            raise AIAssistError("AI extraction returned malformed data")
        data = {
            "name": record.get("name"),
            "designation": record.get("designation"),
            "salary": record.get("salary"),
            "country": record.get("nationality") or record.get("country"),
        }
        try:
            return build_employee_draft(data)
        except ValidationError as e:
            raise AIAssistError(f"AI extraction returned invalid data: {e}") from e

    def summarize_payroll(self, report: MonthlyPayrollReport) -> str:
        if not report.rows:
            raise AIAssistError("No payroll data to summarize")

        gateway = self._require_gateway()
        employee_data = json.dumps([r.as_dict() for r in report.rows])
        try:
            summary = gateway.monthly_salary_summary(
                month=month_name(report.period.month),
                year=str(report.period.year),
                employee_data=employee_data,
            )
        except Exception as e:
            logger.exception("AI payroll summary call failed")
            raise AIAssistError(f"AI summary failed: {e}") from e

        if not summary or not str(summary).strip():
            raise AIAssistError("AI summary was empty")
        return str(summary).strip()
