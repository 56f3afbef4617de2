from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

from ..employees.model import Employee
from .model import Task


def count_active_tasks(employees: Iterable[Employee], tasks: Iterable[Task]) -> Dict[str, int]:
    """Active (not completed) task count per employee id, zero for idle employees."""
    counts = {e.id: 0 for e in employees}
    for t in tasks:
        if t.is_active and t.assigned_to_id in counts:
            counts[t.assigned_to_id] += 1
    return counts


class AssignmentBalancer:
    """Pick the least-loaded employee of a department.

    Strict minimum wins; on a tie the employee met first in roster order is
    kept (no randomness, no round-robin).
    """

    def select_assignee(self, department: str, employees: Sequence[Employee], tasks: Sequence[Task]) -> Optional[Employee]:
        roster = [e for e in employees if e.dept == department]
        if not roster:
            return None

        counts = count_active_tasks(roster, tasks)
        selected: Optional[Employee] = None
        best = None
        for emp in roster:
            n = counts[emp.id]
            if best is None or n < best:
                best = n
                selected = emp
        return selected
