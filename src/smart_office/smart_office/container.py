from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from .core.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME, DEFAULT_STORAGE_NAMESPACE
from .employees.service import EmployeeService
from .employees.store_employee_repository import StoreEmployeeRepository
from .leaves.service import LeaveService
from .leaves.store_leave_repository import StoreLeaveRepository
from .remote.client import RemoteBackendClient
from .storage.base import CollectionStore
from .storage.json_file_store import JsonFileStore
from .storage.local_storage import LocalStorage
from .tasks.lifecycle import StrictTransitionPolicy
from .tasks.service import TaskService
from .tasks.store_task_repository import StoreTaskRepository
from .users.service import AuthService
from .users.session_repository import StoreSessionRepository


@dataclass(frozen=True)
class Container:
    store: CollectionStore

    employees_repo: StoreEmployeeRepository
    tasks_repo: StoreTaskRepository
    leaves_repo: StoreLeaveRepository
    sessions_repo: StoreSessionRepository
    remote: RemoteBackendClient

    employee_service: EmployeeService
    task_service: TaskService
    leave_service: LeaveService
    auth_service: AuthService


def build_store(*, data_path: Optional[str | Path] = None, namespace: str = DEFAULT_STORAGE_NAMESPACE) -> CollectionStore:
    """JSON file when a path is given, otherwise an in-memory namespaced map."""
    if data_path:
        return JsonFileStore(data_path)
    return LocalStorage(namespace=namespace)


def build_container(
    *,
    store: CollectionStore,
    http: Optional[requests.Session] = None,
    admin_username: str = DEFAULT_ADMIN_USERNAME,
    admin_password: str = DEFAULT_ADMIN_PASSWORD,
    strict_transitions: bool = False,
) -> Container:
    employees_repo = StoreEmployeeRepository(store)
    tasks_repo = StoreTaskRepository(store)
    leaves_repo = StoreLeaveRepository(store)
    sessions_repo = StoreSessionRepository(store)
    remote = RemoteBackendClient(http)

    employee_service = EmployeeService(employees_repo, remote)
    task_service = TaskService(
        tasks_repo,
        employee_service,
        remote,
        transitions=StrictTransitionPolicy() if strict_transitions else None,
    )
    leave_service = LeaveService(leaves_repo, remote)
    auth_service = AuthService(
        employees_repo,
        sessions_repo,
        admin_username=admin_username,
        admin_password=admin_password,
    )

    return Container(
        store=store,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        leaves_repo=leaves_repo,
        sessions_repo=sessions_repo,
        remote=remote,
        employee_service=employee_service,
        task_service=task_service,
        leave_service=leave_service,
        auth_service=auth_service,
    )
