from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import Leave


class LeaveRepository(Protocol):
    def list(self, *, employee_id: Optional[str] = None) -> Sequence[Leave]:
        raise NotImplementedError

    def create(self, leave: Leave) -> Leave:
        raise NotImplementedError

    def set_status(self, leave_id: int, status: LeaveStatus) -> Optional[Leave]:
        raise NotImplementedError
