from __future__ import annotations

from urllib.parse import urlparse

import pytest
import requests

from src.smart_office.smart_office.container import build_container
from src.smart_office.smart_office.context import ServiceContext
from src.smart_office.smart_office.core.enums import TaskStatus
from src.smart_office.smart_office.main import create_app
from src.smart_office.smart_office.storage.local_storage import LocalStorage

KWESI = "CSC/22/01/0011"
MICHELLE = "CSC/22/01/1073"


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(overrides={"DATA_PATH": str(tmp_path / "data.json")})


@pytest.fixture
def client(app):
    return app.test_client()


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}


def test_first_start_seeds_the_data_file(app, client):
    assert app.extensions["smart_office"].store.path.exists()
    assert len(client.get("/employees").get_json()) == 5
    assert len(client.get("/tasks").get_json()) == 4


def test_list_tasks_filtered_by_user(client):
    tasks = client.get("/tasks", query_string={"userId": KWESI}).get_json()

    assert [t["title"] for t in tasks] == ["Update Website"]


def test_create_task_ignores_client_id_and_defaults_status(client):
    resp = client.post("/tasks", json={"id": 1, "title": "Audit", "assignedTo": "Kwesi", "assignedToId": KWESI, "dueDate": "2023-12-01", "priority": "Low"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["id"] > 4
    assert body["status"] == "To Do"


def test_create_task_keeps_explicit_status(client):
    resp = client.post("/tasks", json={"title": "x", "assignedTo": "K", "assignedToId": KWESI, "dueDate": "", "status": "In Progress"})

    assert resp.get_json()["status"] == "In Progress"


def test_create_task_rejects_non_object_body(client):
    resp = client.post("/tasks", json=["not", "an", "object"])

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_update_task_merges_fields(client):
    resp = client.put("/tasks/1", json={"title": "Update Intranet"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["title"] == "Update Intranet"
    assert body["priority"] == "High"
    assert body["id"] == 1


def test_update_missing_task_is_404(client):
    assert client.put("/tasks/999", json={"title": "x"}).status_code == 404


def test_patch_status(client):
    resp = client.patch("/tasks/4/status", json={"status": "Completed"})

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "Completed"


def test_patch_status_validation(client):
    assert client.patch("/tasks/4/status", json={"status": "Done-ish"}).status_code == 400
    assert client.patch("/tasks/999/status", json={"status": "Completed"}).status_code == 404


def test_delete_task(client):
    assert client.delete("/tasks/3").status_code == 204
    assert client.delete("/tasks/3").status_code == 204
    assert 3 not in [t["id"] for t in client.get("/tasks").get_json()]


def test_leave_endpoints(client):
    created = client.post("/leaves", json={"id": 1, "employeeId": KWESI, "name": "Kwesi", "type": "Vacation", "startDate": "2023-12-01", "endDate": "2023-12-05", "status": "Approved"})
    assert created.status_code == 201
    leave = created.get_json()
    assert leave["status"] == "Pending"
    assert leave["id"] > 2

    approved = client.patch(f"/leaves/{leave['id']}/status", json={"status": "Approved"})
    assert approved.get_json()["status"] == "Approved"

    mine = client.get("/leaves", query_string={"employeeId": KWESI}).get_json()
    assert {lv["type"] for lv in mine} == {"Sick Leave", "Vacation"}

    assert client.patch("/leaves/999/status", json={"status": "Rejected"}).status_code == 404


class FlaskSession:
    """Routes RemoteBackendClient calls into a Flask test client."""

    def __init__(self, client):
        self._client = client

    def request(self, method, url, params=None, json=None, timeout=None):
        path = urlparse(url).path
        resp = self._client.open(path, method=method, query_string=params, json=json)
        out = requests.Response()
        out.status_code = resp.status_code
        out.url = url
        out.encoding = "utf-8"
        out._content = resp.get_data()
        return out


def test_services_against_live_server(client):
    ctx = ServiceContext(api_base="http://backend.test")
    # the local store stays empty: every result comes from the server
    svc = build_container(store=LocalStorage(), http=FlaskSession(client)).task_service

    # Kwesi (IT) declines; Michelle (IT) has one active task too and Kwesi comes first, so it stays with him
    declined = svc.decline_task(ctx, 1)
    assert declined.status == TaskStatus.DECLINED
    assert declined.assigned_to_id == KWESI

    # once Michelle's task is done she is the less loaded teammate
    svc.set_task_status(ctx, 4, TaskStatus.COMPLETED)
    reassigned = svc.decline_task(ctx, 1)

    assert reassigned.assigned_to_id == MICHELLE
    assert reassigned.assigned_to == "Michelle Nana Akua Arhin"
    assert reassigned.status == TaskStatus.PENDING_ACCEPTANCE
    on_server = {t["id"]: t for t in client.get("/tasks").get_json()}
    assert on_server[1]["assignedToId"] == MICHELLE


def test_corrupt_data_file_serves_empty_collections(app, client):
    app.extensions["smart_office"].store.path.write_text("not json", encoding="utf-8")

    resp = client.get("/tasks")

    assert resp.status_code == 200
    assert resp.get_json() == []
