from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ..core.enums import TaskStatus
from .model import Task


@dataclass(frozen=True)
class TaskStats:
    total: int
    completed: int
    in_progress: int


def filter_tasks(tasks: Iterable[Task], query: str) -> List[Task]:
    """Case-insensitive search over title, assignee, priority and status."""
    q = (query or "").strip().lower()
    if not q:
        return list(tasks)
    return [
        t
        for t in tasks
        if q in t.title.lower()
        or q in t.assigned_to.lower()
        or q in t.priority.value.lower()
        or q in t.status.value.lower()
    ]


def summarize_tasks(tasks: Iterable[Task]) -> TaskStats:
    items = list(tasks)
    return TaskStats(
        total=len(items),
        completed=sum(1 for t in items if t.status == TaskStatus.COMPLETED),
        in_progress=sum(1 for t in items if t.status == TaskStatus.IN_PROGRESS),
    )
