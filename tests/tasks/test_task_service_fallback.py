from __future__ import annotations

import requests

from src.smart_office.smart_office.container import build_container
from src.smart_office.smart_office.core.constants import TASKS
from src.smart_office.smart_office.core.enums import TaskStatus
from src.smart_office.smart_office.tasks.model import Task

AMA = "CSC/22/01/0001"
KOFI = "CSC/22/01/0002"

LOCAL_TASKS = [
    {"id": 1, "title": "Local one", "assignedTo": "Ama", "assignedToId": AMA, "dueDate": "2023-10-30", "status": "To Do", "priority": "High"},
    {"id": 2, "title": "Local two", "assignedTo": "Kofi", "assignedToId": KOFI, "dueDate": "2023-10-30", "status": "Completed", "priority": "Low"},
]


def test_list_tasks_falls_back_to_local_store_when_backend_is_down(store, remote_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    http = fake_http(error=requests.ConnectionError("connection refused"))
    svc = build_container(store=store, http=http).task_service

    tasks = svc.list_tasks(remote_ctx)

    assert [t.title for t in tasks] == ["Local one", "Local two"]
    assert len(http.calls) == 1
    assert http.calls[0]["timeout"] == 1.5


def test_list_tasks_falls_back_on_server_error(store, remote_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    http = fake_http({("GET", "/tasks"): (500, {"error": "boom"})})
    svc = build_container(store=store, http=http).task_service

    assert [t.id for t in svc.list_tasks(remote_ctx, AMA)] == [1]


def test_list_tasks_falls_back_on_malformed_payload(store, remote_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    http = fake_http({("GET", "/tasks"): (200, [{"id": 9, "status": "Archived"}])})
    svc = build_container(store=store, http=http).task_service

    assert [t.id for t in svc.list_tasks(remote_ctx)] == [1, 2]


def test_list_tasks_uses_remote_data_when_available(store, remote_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    remote_task = {"id": 77, "title": "Remote", "assignedTo": "Ama", "assignedToId": AMA, "dueDate": "2023-11-01", "status": "To Do", "priority": "Medium"}
    http = fake_http({("GET", "/tasks"): (200, [remote_task])})
    svc = build_container(store=store, http=http).task_service

    tasks = svc.list_tasks(remote_ctx, AMA)

    assert [t.id for t in tasks] == [77]
    assert http.calls[0]["params"] == {"userId": AMA}


def test_fallback_is_decided_per_call(store, remote_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    http = fake_http(error=requests.Timeout("slow"))
    svc = build_container(store=store, http=http).task_service

    assert [t.id for t in svc.list_tasks(remote_ctx)] == [1, 2]

    http.error = None
    http.routes[("GET", "/tasks")] = (200, [])
    assert svc.list_tasks(remote_ctx) == []
    assert len(http.calls) == 2


def test_local_mode_never_calls_the_backend(store, local_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    http = fake_http(error=AssertionError("backend must not be called"))
    svc = build_container(store=store, http=http).task_service

    assert len(svc.list_tasks(local_ctx)) == 2
    assert http.calls == []


def test_create_falls_back_and_persists_locally(store, remote_ctx, fake_http):
    http = fake_http(error=requests.ConnectionError("down"))
    svc = build_container(store=store, http=http).task_service

    created = svc.save_task(remote_ctx, Task(title="New", assigned_to="Ama", assigned_to_id=AMA, due_date="2023-12-01"))

    assert created.id is not None
    assert created.status == TaskStatus.TODO
    assert [r["title"] for r in store.read(TASKS)] == ["New"]
    assert "id" not in http.calls[0]["json"]
    assert http.calls[0]["json"]["status"] == "To Do"


def test_status_change_uses_remote_result(store, remote_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    updated = dict(LOCAL_TASKS[0], status="In Progress")
    http = fake_http({("PATCH", "/tasks/1/status"): (200, updated)})
    svc = build_container(store=store, http=http).task_service

    task = svc.set_task_status(remote_ctx, 1, TaskStatus.IN_PROGRESS)

    assert task.status == TaskStatus.IN_PROGRESS
    assert http.calls[0]["json"] == {"status": "In Progress"}
    # the backend owns the data in remote mode; the local copy is untouched
    assert store.read(TASKS)[0]["status"] == "To Do"


def test_decline_falls_back_end_to_end(store, remote_ctx, fake_http):
    store.write(TASKS, [
        {"id": 1, "title": "A", "assignedTo": "Ama", "assignedToId": AMA, "dueDate": "", "status": "Pending Acceptance", "priority": "High"},
        {"id": 2, "title": "B", "assignedTo": "Ama", "assignedToId": AMA, "dueDate": "", "status": "To Do", "priority": "High"},
    ])
    http = fake_http(error=requests.ConnectionError("down"))
    svc = build_container(store=store, http=http).task_service

    task = svc.decline_task(remote_ctx, 1)

    assert task.assigned_to_id == KOFI
    assert task.status == TaskStatus.PENDING_ACCEPTANCE
    assert store.read(TASKS)[0]["assignedToId"] == KOFI


def test_decline_reports_declined_when_reassignment_cannot_be_saved(store, remote_ctx, fake_http, it_team):
    # the server records the decline but rejects the follow-up PUT; the local store has no copy
    declined = {"id": 1, "title": "A", "assignedTo": "Ama", "assignedToId": AMA, "dueDate": "", "status": "Declined", "priority": "High"}
    http = fake_http({
        ("PATCH", "/tasks/1/status"): (200, declined),
        ("GET", "/employees"): (200, it_team),
        ("GET", "/tasks"): (200, [declined]),
    })
    svc = build_container(store=store, http=http).task_service

    task = svc.decline_task(remote_ctx, 1)

    assert task.status == TaskStatus.DECLINED
    assert task.assigned_to_id == AMA
    assert ("PUT", "http://backend.test/tasks/1") in [(c["method"], c["url"]) for c in http.calls]
    assert store.read(TASKS) == []


def test_get_task_reads_remote_then_local(store, remote_ctx, fake_http):
    store.write(TASKS, LOCAL_TASKS)
    remote_task = dict(LOCAL_TASKS[0], title="Remote copy")
    http = fake_http({("GET", "/tasks"): (200, [remote_task])})
    svc = build_container(store=store, http=http).task_service

    assert svc.get_task(remote_ctx, 1).title == "Remote copy"
    assert svc.get_task(remote_ctx, 2) is None

    http.error = requests.ConnectionError("down")
    assert svc.get_task(remote_ctx, 2).title == "Local two"
