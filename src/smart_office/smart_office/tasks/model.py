from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import parse_enum
from ..core.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class Task:
    """Domain entity: Task.

    `assigned_to` is the assignee's display name, denormalized next to
    `assigned_to_id`; the two only ever change together.
    """

    title: str
    assigned_to: str
    assigned_to_id: str
    due_date: str
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    id: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.status != TaskStatus.COMPLETED

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Task":
        """Build from the camelCase JSON record. Raises ValidationError on bad enums."""
        rid = r.get("id")
        return cls(
            id=int(rid) if rid is not None else None,
            title=str(r.get("title", "")),
            assigned_to=str(r.get("assignedTo", "")),
            assigned_to_id=str(r.get("assignedToId", "")),
            due_date=str(r.get("dueDate", "")),
            priority=parse_enum(TaskPriority, r.get("priority", TaskPriority.MEDIUM.value), "priority"),
            status=parse_enum(TaskStatus, r.get("status", TaskStatus.TODO.value), "status"),
        )

    def to_record(self) -> dict:
        record = {
            "title": self.title,
            "assignedTo": self.assigned_to,
            "assignedToId": self.assigned_to_id,
            "dueDate": self.due_date,
            "status": self.status.value,
            "priority": self.priority.value,
        }
        if self.id is not None:
            record = {"id": self.id, **record}
        return record
