from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Per-day attendance status stored for an employee."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"

    @property
    def short_code(self) -> str:
        return {
            AttendanceMark.PRESENT: "P",
            AttendanceMark.ABSENT: "A",
            AttendanceMark.LEAVE: "L",
        }[self]


class TaskStatus(str, Enum):
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
