from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task, TaskDraft


class TaskRepository(Protocol):
    def list_all(self, *, status: Optional[TaskStatus] = None) -> Sequence[Task]:
        """Tasks ordered by due date, soonest first."""

        raise NotImplementedError

    def create(self, draft: TaskDraft) -> str:
        raise NotImplementedError

    def update(self, task_id: str, draft: TaskDraft) -> bool:
        raise NotImplementedError

    def set_status(self, task_id: str, status: TaskStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, task_id: str) -> bool:
        raise NotImplementedError
