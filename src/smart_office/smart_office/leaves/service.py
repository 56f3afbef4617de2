from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Union

from ..common.validators import parse_enum
from ..context import ServiceContext
from ..core.enums import LeaveStatus
from ..remote.client import RemoteBackendClient
from ..remote.fallback import call_with_fallback
from .model import Leave
from .repository import LeaveRepository


class LeaveService:
    def __init__(self, leaves: LeaveRepository, remote: RemoteBackendClient):
        self._leaves = leaves
        self._remote = remote

    def list_leaves(self, ctx: ServiceContext, employee_id: Optional[str] = None) -> List[Leave]:
        result = call_with_fallback(
            ctx,
            lambda: self._remote.list_leaves(ctx, employee_id=employee_id),
            lambda: list(self._leaves.list(employee_id=employee_id)),
            operation="list_leaves",
        )
        return list(result.value)

    def apply_leave(self, ctx: ServiceContext, leave: Leave) -> Leave:
        """New request: a fresh id is assigned and the status is always Pending."""
        new_leave = replace(leave, id=None, status=LeaveStatus.PENDING)
        return call_with_fallback(
            ctx,
            lambda: self._remote.create_leave(ctx, new_leave),
            lambda: self._leaves.create(new_leave),
            operation="apply_leave",
        ).value

    def set_leave_status(self, ctx: ServiceContext, leave_id: int, status: Union[LeaveStatus, str]) -> Optional[Leave]:
        status = parse_enum(LeaveStatus, status, "status")
        return call_with_fallback(
            ctx,
            lambda: self._remote.set_leave_status(ctx, leave_id, status),
            lambda: self._leaves.set_status(leave_id, status),
            operation="set_leave_status",
        ).value

    def approve_leave(self, ctx: ServiceContext, leave_id: int) -> Optional[Leave]:
        return self.set_leave_status(ctx, leave_id, LeaveStatus.APPROVED)

    def reject_leave(self, ctx: ServiceContext, leave_id: int) -> Optional[Leave]:
        return self.set_leave_status(ctx, leave_id, LeaveStatus.REJECTED)
