from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.enums import TaskPriority, TaskStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Task, TaskDraft
from .repository import TaskRepository


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, status: Optional[TaskStatus] = None) -> Sequence[Task]:
        sql = "SELECT task_id, title, description, status, priority, due_date FROM tasks"
        params: tuple = ()
        if status is not None:
            sql += " WHERE status=%s"
            params = (status.value,)
        sql += " ORDER BY due_date ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            rows = fetchall(cur)

        return [
            Task(
                task_id=r["task_id"],
                title=r["title"],
                description=r.get("description"),
                status=TaskStatus(r["status"]),
                priority=TaskPriority(r["priority"]),
                due_date=normalize_mysql_date(r["due_date"]),
            )
            for r in rows
        ]

    def create(self, draft: TaskDraft) -> str:
        task_id = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks(task_id, title, description, status, priority, due_date)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (task_id, draft.title, draft.description, draft.status.value, draft.priority.value, draft.due_date),
            )
        return task_id

    def update(self, task_id: str, draft: TaskDraft) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE tasks SET title=%s, description=%s, status=%s, priority=%s, due_date=%s
                WHERE task_id=%s
                """,
                (draft.title, draft.description, draft.status.value, draft.priority.value, draft.due_date, task_id),
            )
            cur.execute("SELECT 1 AS found FROM tasks WHERE task_id=%s", (task_id,))
            return fetchone(cur) is not None

    def set_status(self, task_id: str, status: TaskStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE tasks SET status=%s WHERE task_id=%s", (status.value, task_id))
            cur.execute("SELECT 1 AS found FROM tasks WHERE task_id=%s", (task_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, task_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE task_id=%s", (task_id,))
            return cur.rowcount > 0
