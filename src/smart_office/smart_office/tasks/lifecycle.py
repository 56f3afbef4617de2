"""Task status lifecycle.

Intended flow::

    Pending Acceptance -> To Do (accepted) | Declined
    Declined           -> Pending Acceptance (reassigned)
    To Do              -> In Progress -> Completed

`Completed` is terminal. The service does not enforce this by default: any
status can be set from any status. Inject `StrictTransitionPolicy` to enforce it.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Protocol

from ..core.enums import TaskStatus
from ..core.exceptions import InvalidTransitionError

ALLOWED_TRANSITIONS: Dict[TaskStatus, FrozenSet[TaskStatus]] = {
    TaskStatus.PENDING_ACCEPTANCE: frozenset({TaskStatus.TODO, TaskStatus.DECLINED}),
    TaskStatus.DECLINED: frozenset({TaskStatus.PENDING_ACCEPTANCE}),
    TaskStatus.TODO: frozenset({TaskStatus.IN_PROGRESS}),
    TaskStatus.IN_PROGRESS: frozenset({TaskStatus.COMPLETED}),
    TaskStatus.COMPLETED: frozenset(),
}


def is_allowed(current: TaskStatus, target: TaskStatus) -> bool:
    if current == target:
        return True
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


class TransitionPolicy(Protocol):
    def check(self, current: TaskStatus, target: TaskStatus) -> None:
        raise NotImplementedError


class PermissiveTransitionPolicy:
    """Accepts every change, same as injecting no policy."""

    def check(self, current: TaskStatus, target: TaskStatus) -> None:
        return None


class StrictTransitionPolicy:
    def check(self, current: TaskStatus, target: TaskStatus) -> None:
        if not is_allowed(current, target):
            raise InvalidTransitionError(f"Cannot move task from '{current.value}' to '{target.value}'")
