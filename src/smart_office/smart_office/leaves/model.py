from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import parse_enum
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class Leave:
    employee_id: str
    name: str
    type: str
    start_date: str
    end_date: str
    status: LeaveStatus = LeaveStatus.PENDING
    id: Optional[int] = None

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Leave":
        rid = r.get("id")
        return cls(
            id=int(rid) if rid is not None else None,
            employee_id=str(r.get("employeeId", "")),
            name=str(r.get("name", "")),
            type=str(r.get("type", "")),
            start_date=str(r.get("startDate", "")),
            end_date=str(r.get("endDate", "")),
            status=parse_enum(LeaveStatus, r.get("status", LeaveStatus.PENDING.value), "status"),
        )

    def to_record(self) -> dict:
        record = {
            "employeeId": self.employee_id,
            "name": self.name,
            "type": self.type,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "status": self.status.value,
        }
        if self.id is not None:
            record = {"id": self.id, **record}
        return record
