from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task


class TaskRepository(Protocol):
    """Repository interface for the tasks collection.

    Note (DIP): services depend on this interface, not on a concrete store.
    Missing ids are reported as `None` / `False`, never raised.
    """

    def list(self, *, assignee_id: Optional[str] = None) -> Sequence[Task]:
        raise NotImplementedError

    def get(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def create(self, task: Task) -> Task:
        """Append with a fresh id. The given status is kept."""
        raise NotImplementedError

    def replace(self, task: Task) -> Optional[Task]:
        raise NotImplementedError

    def update_fields(self, task_id: int, changes: Mapping[str, Any]) -> Optional[Task]:
        """Merge camelCase fields into the stored record (id is never changed)."""
        raise NotImplementedError

    def set_status(self, task_id: int, status: TaskStatus) -> Optional[Task]:
        raise NotImplementedError

    def delete(self, task_id: int) -> bool:
        raise NotImplementedError
