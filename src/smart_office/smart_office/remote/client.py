from __future__ import annotations

from typing import Any, Callable, List, Optional, TypeVar

import requests

from ..context import ServiceContext
from ..core.enums import LeaveStatus, TaskStatus
from ..core.exceptions import BackendUnavailable, ValidationError
from ..employees.model import Employee
from ..leaves.model import Leave
from ..tasks.model import Task

M = TypeVar("M")


class RemoteBackendClient:
    """Client for the SmartOffice REST backend.

    Every failure (connection error, timeout, non-2xx status, body that does not
    parse into the expected models) is raised as BackendUnavailable. A 404 is a
    failure too: the caller falls back to the local store, which reports the
    missing record itself.
    """

    def __init__(self, http: Optional[requests.Session] = None):
        self._http = http or requests.Session()

    def _request(self, ctx: ServiceContext, method: str, path: str, *, params=None, json_body=None, expect_body: bool = True) -> Any:
        url = ctx.url(path)
        try:
            resp = self._http.request(method, url, params=params, json=json_body, timeout=ctx.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise BackendUnavailable(f"{method} {url} failed: {e}") from e

        if not expect_body:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise BackendUnavailable(f"{method} {url} returned a non-JSON body") from e

    @staticmethod
    def _parse(payload: Any, parse: Callable[[Any], M]) -> M:
        try:
            return parse(payload)
        except (ValidationError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise BackendUnavailable(f"malformed payload: {e}") from e

    def _parse_list(self, payload: Any, parse: Callable[[Any], M]) -> List[M]:
        if not isinstance(payload, list):
            raise BackendUnavailable("malformed payload: expected a JSON array")
        return [self._parse(item, parse) for item in payload]

    def health(self, ctx: ServiceContext) -> bool:
        body = self._request(ctx, "GET", "/health")
        return bool(isinstance(body, dict) and body.get("ok"))

    # Employees
    def list_employees(self, ctx: ServiceContext) -> List[Employee]:
        return self._parse_list(self._request(ctx, "GET", "/employees"), Employee.from_record)

    # Tasks
    def list_tasks(self, ctx: ServiceContext, *, user_id: Optional[str] = None) -> List[Task]:
        params = {"userId": user_id} if user_id else None
        return self._parse_list(self._request(ctx, "GET", "/tasks", params=params), Task.from_record)

    def create_task(self, ctx: ServiceContext, task: Task) -> Task:
        body = task.to_record()
        body.pop("id", None)
        return self._parse(self._request(ctx, "POST", "/tasks", json_body=body), Task.from_record)

    def update_task(self, ctx: ServiceContext, task: Task) -> Task:
        return self._parse(self._request(ctx, "PUT", f"/tasks/{task.id}", json_body=task.to_record()), Task.from_record)

    def set_task_status(self, ctx: ServiceContext, task_id: int, status: TaskStatus) -> Task:
        body = self._request(ctx, "PATCH", f"/tasks/{task_id}/status", json_body={"status": status.value})
        return self._parse(body, Task.from_record)

    def delete_task(self, ctx: ServiceContext, task_id: int) -> bool:
        self._request(ctx, "DELETE", f"/tasks/{task_id}", expect_body=False)
        return True

    # Leaves
    def list_leaves(self, ctx: ServiceContext, *, employee_id: Optional[str] = None) -> List[Leave]:
        params = {"employeeId": employee_id} if employee_id else None
        return self._parse_list(self._request(ctx, "GET", "/leaves", params=params), Leave.from_record)

    def create_leave(self, ctx: ServiceContext, leave: Leave) -> Leave:
        body = leave.to_record()
        body.pop("id", None)
        return self._parse(self._request(ctx, "POST", "/leaves", json_body=body), Leave.from_record)

    def set_leave_status(self, ctx: ServiceContext, leave_id: int, status: LeaveStatus) -> Leave:
        body = self._request(ctx, "PATCH", f"/leaves/{leave_id}/status", json_body={"status": status.value})
        return self._parse(body, Leave.from_record)
