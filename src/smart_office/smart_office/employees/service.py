from __future__ import annotations

from typing import List, Optional

from ..context import ServiceContext
from ..remote.client import RemoteBackendClient
from ..remote.fallback import call_with_fallback
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: read the employee roster (remote first, local fallback)."""

    def __init__(self, employees: EmployeeRepository, remote: RemoteBackendClient):
        self._employees = employees
        self._remote = remote

    def list_employees(self, ctx: ServiceContext, *, department: Optional[str] = None) -> List[Employee]:
        result = call_with_fallback(
            ctx,
            lambda: self._remote.list_employees(ctx),
            lambda: list(self._employees.list_all()),
            operation="list_employees",
        )
        employees = list(result.value)
        if department is not None:
            return [e for e in employees if e.dept == department]
        return employees

    def get_employee(self, ctx: ServiceContext, employee_id: str) -> Optional[Employee]:
        for e in self.list_employees(ctx):
            if e.id == employee_id:
                return e
        return None
