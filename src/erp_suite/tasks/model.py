from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class Task:
    task_id: str
    title: str
    status: TaskStatus
    priority: TaskPriority
    due_date: date
    description: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "task_id": self.task_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "due_date": self.due_date.strftime("%Y-%m-%d"),
        }


@dataclass(frozen=True)
class TaskDraft:
    title: str
    status: TaskStatus
    priority: TaskPriority
    due_date: date
    description: Optional[str] = None
