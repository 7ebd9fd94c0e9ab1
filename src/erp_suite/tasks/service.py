from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import require_iso_date
from ..common.validators import optional_text, require_choice, require_min_length
from ..core.constants import MIN_NAME_LENGTH
from ..core.enums import TaskPriority, TaskStatus
from ..core.exceptions import NotFoundError
from .model import Task, TaskDraft
from .repository import TaskRepository


def build_task_draft(data: Mapping[str, Any]) -> TaskDraft:
    return TaskDraft(
        title=require_min_length(data.get("title"), "Title", MIN_NAME_LENGTH),
        description=optional_text(data.get("description")),
        status=require_choice(data.get("status", TaskStatus.TODO.value), TaskStatus, "Status"),
        priority=require_choice(data.get("priority", TaskPriority.MEDIUM.value), TaskPriority, "Priority"),
        due_date=require_iso_date(data.get("due_date"), "Due date"),
    )


class TaskService:
    """Use case: task board. Status changes are unconstrained (any -> any)."""

    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def list_tasks(self, *, status: Optional[str] = None) -> Sequence[Task]:
        wanted = require_choice(status, TaskStatus, "Status") if status else None
        return self._tasks.list_all(status=wanted)

    def create_task(self, data: Mapping[str, Any]) -> str:
        return self._tasks.create(build_task_draft(data))

    def update_task(self, task_id: str, data: Mapping[str, Any]) -> None:
        if not self._tasks.update(task_id, build_task_draft(data)):
            raise NotFoundError("Task not found")

    def change_status(self, task_id: str, status: Any) -> None:
        if not self._tasks.set_status(task_id, require_choice(status, TaskStatus, "Status")):
            raise NotFoundError("Task not found")

    def delete_task(self, task_id: str) -> None:
        if not self._tasks.delete_by_id(task_id):
            raise NotFoundError("Task not found")
