from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """What we store under `current_user` after login."""

    id: str
    name: str
    role: Role
    email: str = ""

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "SessionUser":
        return cls(
            id=str(r["id"]),
            name=str(r.get("name", "")),
            role=Role(r.get("role", Role.EMPLOYEE.value)),
            email=str(r.get("email", "")),
        )

    def to_record(self) -> dict:
        return {"id": self.id, "name": self.name, "role": self.role.value, "email": self.email}
