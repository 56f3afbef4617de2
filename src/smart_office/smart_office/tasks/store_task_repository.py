from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, List, Mapping, Optional, Sequence

from ..common.ids import next_record_id, now_millis
from ..core.constants import TASKS
from ..core.enums import TaskStatus
from ..core.exceptions import ValidationError
from ..storage.base import CollectionStore
from .model import Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)


def _index_of(records: List[dict], task_id: int) -> int:
    for i, r in enumerate(records):
        if r.get("id") == task_id:
            return i
    return -1


class StoreTaskRepository(TaskRepository):
    """Tasks kept in the `tasks` collection of a CollectionStore.

    Mutations work on the raw records so entries this code cannot parse are
    written back untouched.
    """

    def __init__(self, store: CollectionStore, *, clock: Callable[[], int] = now_millis):
        self._store = store
        self._clock = clock

    def list(self, *, assignee_id: Optional[str] = None) -> Sequence[Task]:
        tasks: List[Task] = []
        for r in self._store.read(TASKS):
            try:
                tasks.append(Task.from_record(r))
            except (ValidationError, TypeError, ValueError) as e:
                logger.warning("Skipping unreadable task record %r: %s", r.get("id"), e)
        if assignee_id:
            return [t for t in tasks if t.assigned_to_id == assignee_id]
        return tasks

    def get(self, task_id: int) -> Optional[Task]:
        for t in self.list():
            if t.id == task_id:
                return t
        return None

    def create(self, task: Task) -> Task:
        records = self._store.read(TASKS)
        created = replace(task, id=next_record_id(records, clock=self._clock))
        records.append(created.to_record())
        self._store.write(TASKS, records)
        return created

    def replace(self, task: Task) -> Optional[Task]:
        if task.id is None:
            return None
        records = self._store.read(TASKS)
        idx = _index_of(records, task.id)
        if idx == -1:
            return None
        records[idx] = task.to_record()
        self._store.write(TASKS, records)
        return task

    def update_fields(self, task_id: int, changes: Mapping[str, Any]) -> Optional[Task]:
        records = self._store.read(TASKS)
        idx = _index_of(records, task_id)
        if idx == -1:
            return None
        merged = Task.from_record({**records[idx], **changes, "id": task_id})
        records[idx] = merged.to_record()
        self._store.write(TASKS, records)
        return merged

    def set_status(self, task_id: int, status: TaskStatus) -> Optional[Task]:
        records = self._store.read(TASKS)
        idx = _index_of(records, task_id)
        if idx == -1:
            return None
        records[idx]["status"] = status.value
        self._store.write(TASKS, records)
        return Task.from_record(records[idx])

    def delete(self, task_id: int) -> bool:
        records = self._store.read(TASKS)
        kept = [r for r in records if r.get("id") != task_id]
        if len(kept) == len(records):
            return False
        self._store.write(TASKS, kept)
        return True
