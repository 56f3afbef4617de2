from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from ..common.ids import next_record_id, now_millis
from ..core.constants import LEAVES
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..storage.base import CollectionStore
from .model import Leave
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class StoreLeaveRepository(LeaveRepository):
    def __init__(self, store: CollectionStore, *, clock: Callable[[], int] = now_millis):
        self._store = store
        self._clock = clock

    def list(self, *, employee_id: Optional[str] = None) -> Sequence[Leave]:
        leaves: List[Leave] = []
        for r in self._store.read(LEAVES):
            try:
                leaves.append(Leave.from_record(r))
            except (ValidationError, TypeError, ValueError) as e:
                logger.warning("Skipping unreadable leave record %r: %s", r.get("id"), e)
        if employee_id:
            return [lv for lv in leaves if lv.employee_id == employee_id]
        return leaves

    def create(self, leave: Leave) -> Leave:
        records = self._store.read(LEAVES)
        created = replace(leave, id=next_record_id(records, clock=self._clock))
        records.append(created.to_record())
        self._store.write(LEAVES, records)
        return created

    def set_status(self, leave_id: int, status: LeaveStatus) -> Optional[Leave]:
        records = self._store.read(LEAVES)
        for r in records:
            if r.get("id") == leave_id:
                r["status"] = status.value
                self._store.write(LEAVES, records)
                return Leave.from_record(r)
        return None
