from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class AIGateway(Protocol):
    """External model calls used by the AI helpers.

    Implementations wrap a hosted model; the app only depends on this shape.
    """

    def extract_employee_info(self, *, photo_data_uri: str, context: Optional[str]) -> Sequence[Mapping[str, Any]]:
        """Return records shaped {name, designation, salary, nationality}."""

        raise NotImplementedError

    def monthly_salary_summary(self, *, month: str, year: str, employee_data: str) -> str:
        raise NotImplementedError
