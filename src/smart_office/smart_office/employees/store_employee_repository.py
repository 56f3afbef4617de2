from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..core.constants import EMPLOYEES
from ..storage.base import CollectionStore
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        employees: List[Employee] = []
        for r in self._store.read(EMPLOYEES):
            try:
                employees.append(Employee.from_record(r))
            except (KeyError, ValueError) as e:
                logger.warning("Skipping unreadable employee record %r: %s", r.get("id"), e)
        return employees

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for e in self.list_all():
            if e.id == employee_id:
                return e
        return None

    def get_by_login(self, login: str) -> Optional[Employee]:
        for e in self.list_all():
            if e.email == login or e.id == login:
                return e
        return None
