from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Union

from ..common.validators import parse_enum
from ..context import ServiceContext
from ..core.enums import TaskStatus
from ..employees.service import EmployeeService
from ..remote.client import RemoteBackendClient
from ..remote.fallback import call_with_fallback
from .balancer import AssignmentBalancer
from .lifecycle import TransitionPolicy
from .model import Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Use case: task CRUD, status changes and the decline/reassign workflow.

    Every call tries the remote backend when `ctx.api_base` is set and falls back
    to the local repository when it is unavailable. A missing task is reported as
    `None`, never raised.
    """

    def __init__(
        self,
        tasks: TaskRepository,
        employees: EmployeeService,
        remote: RemoteBackendClient,
        *,
        balancer: AssignmentBalancer | None = None,
        transitions: TransitionPolicy | None = None,
    ):
        self._tasks = tasks
        self._employees = employees
        self._remote = remote
        self._balancer = balancer or AssignmentBalancer()
        # None = unrestricted status setter
        self._transitions = transitions

    def list_tasks(self, ctx: ServiceContext, assignee_id: Optional[str] = None) -> List[Task]:
        result = call_with_fallback(
            ctx,
            lambda: self._remote.list_tasks(ctx, user_id=assignee_id),
            lambda: list(self._tasks.list(assignee_id=assignee_id)),
            operation="list_tasks",
        )
        return list(result.value)

    def get_task(self, ctx: ServiceContext, task_id: int) -> Optional[Task]:
        def _remote() -> Optional[Task]:
            return next((t for t in self._remote.list_tasks(ctx) if t.id == task_id), None)

        return call_with_fallback(ctx, _remote, lambda: self._tasks.get(task_id), operation="get_task").value

    def save_task(self, ctx: ServiceContext, task: Task) -> Optional[Task]:
        """Update when `task.id` is set, otherwise create with a new id and status To Do.

        Updating an unknown id is a no-op that returns None.
        """
        if task.id is not None:
            return call_with_fallback(
                ctx,
                lambda: self._remote.update_task(ctx, task),
                lambda: self._tasks.replace(task),
                operation="save_task",
            ).value

        new_task = replace(task, status=TaskStatus.TODO)
        return call_with_fallback(
            ctx,
            lambda: self._remote.create_task(ctx, new_task),
            lambda: self._tasks.create(new_task),
            operation="create_task",
        ).value

    def delete_task(self, ctx: ServiceContext, task_id: int) -> bool:
        def _local() -> bool:
            self._tasks.delete(task_id)
            return True

        return call_with_fallback(
            ctx,
            lambda: self._remote.delete_task(ctx, task_id),
            _local,
            operation="delete_task",
        ).value

    def set_task_status(self, ctx: ServiceContext, task_id: int, status: Union[TaskStatus, str]) -> Optional[Task]:
        status = parse_enum(TaskStatus, status, "status")
        if self._transitions is not None:
            current = self.get_task(ctx, task_id)
            if current is None:
                return None
            self._transitions.check(current.status, status)

        return call_with_fallback(
            ctx,
            lambda: self._remote.set_task_status(ctx, task_id, status),
            lambda: self._tasks.set_status(task_id, status),
            operation="set_task_status",
        ).value

    def accept_task(self, ctx: ServiceContext, task_id: int) -> Optional[Task]:
        return self.set_task_status(ctx, task_id, TaskStatus.TODO)

    def decline_task(self, ctx: ServiceContext, task_id: int) -> Optional[Task]:
        """Mark the task Declined, then hand it to the least-loaded teammate.

        The task moves to "Pending Acceptance" under the new assignee only when
        the balancer picks somebody else; otherwise it stays Declined with its
        assignee unchanged. The balancer breaks ties by roster order, so a
        teammate listed before the decliner with the same load takes the task.
        If the reassignment cannot be saved the Declined task is returned.
        Returns None for an unknown id.
        """
        declined = self.set_task_status(ctx, task_id, TaskStatus.DECLINED)
        if declined is None:
            return None

        previous_id = declined.assigned_to_id
        employees = self._employees.list_employees(ctx)
        current = next((e for e in employees if e.id == previous_id), None)
        if current is None:
            logger.info("Task %s declined by unknown employee %s; not reassigned", task_id, previous_id)
            return declined

        candidate = self._balancer.select_assignee(current.dept, employees, self.list_tasks(ctx))
        if candidate is None or candidate.id == previous_id:
            logger.info("Task %s stays declined: no other assignee in %s", task_id, current.dept)
            return declined

        if self._transitions is not None:
            self._transitions.check(TaskStatus.DECLINED, TaskStatus.PENDING_ACCEPTANCE)

        reassigned = replace(
            declined,
            assigned_to_id=candidate.id,
            assigned_to=candidate.name,
            status=TaskStatus.PENDING_ACCEPTANCE,
        )
        saved = self.save_task(ctx, reassigned)
        if saved is None:
            logger.warning("Task %s: reassignment to %s was not saved; left declined", task_id, candidate.id)
            return declined
        logger.info("Task %s reassigned from %s to %s", task_id, previous_id, candidate.id)
        return saved
