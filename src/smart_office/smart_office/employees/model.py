from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no storage code). Employees are seeded and never
    created, updated or deleted by the core.
    """

    id: str
    name: str
    dept: str
    position: str = ""
    email: str = ""
    phone: str = ""
    role: Role = Role.EMPLOYEE

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Employee":
        role = r.get("role") or Role.EMPLOYEE.value
        return cls(
            id=str(r["id"]),
            name=str(r.get("name", "")),
            dept=str(r.get("dept", "")),
            position=str(r.get("position", "")),
            email=str(r.get("email", "")),
            phone=str(r.get("phone", "")),
            role=Role(role),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "dept": self.dept,
            "position": self.position,
            "email": self.email,
            "phone": self.phone,
            "role": self.role.value,
        }
