from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

import pytest
import requests

from src.smart_office.smart_office.context import ServiceContext
from src.smart_office.smart_office.core.constants import EMPLOYEES, LEAVES, TASKS
from src.smart_office.smart_office.storage.local_storage import LocalStorage

API_BASE = "http://backend.test"


def _response(url: str, status: int, body: Any) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.encoding = "utf-8"
    if body is None:
        resp._content = b""
    elif isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = json.dumps(body).encode("utf-8")
    return resp


class FakeHttp:
    """Stands in for requests.Session: canned responses keyed by (method, path)."""

    def __init__(self, routes: Optional[Dict[Tuple[str, str], Tuple[int, Any]]] = None, *, error: Optional[Exception] = None):
        self.routes = dict(routes or {})
        self.error = error
        self.calls: List[dict] = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        path = urlparse(url).path
        if (method, path) not in self.routes:
            return _response(url, 404, {"error": "Not found"})
        status, body = self.routes[(method, path)]
        return _response(url, status, body)


@pytest.fixture
def fake_http():
    return FakeHttp


@pytest.fixture
def local_ctx():
    return ServiceContext()


@pytest.fixture
def remote_ctx():
    return ServiceContext(api_base=API_BASE, timeout=1.5)


@pytest.fixture
def it_team():
    return [
        {"id": "CSC/22/01/0001", "name": "Ama", "dept": "IT", "position": "Dev", "email": "ama@smartoffice.com", "phone": "", "role": "employee"},
        {"id": "CSC/22/01/0002", "name": "Kofi", "dept": "IT", "position": "Dev", "email": "kofi@smartoffice.com", "phone": "", "role": "employee"},
        {"id": "CSC/22/01/0003", "name": "Esi", "dept": "HR", "position": "Manager", "email": "esi@smartoffice.com", "phone": "", "role": "employee"},
    ]


@pytest.fixture
def store(it_team):
    """A store with three employees (two in IT, one in HR) and no tasks or leaves."""
    s = LocalStorage()
    s.write(EMPLOYEES, it_team)
    s.write(TASKS, [])
    s.write(LEAVES, [])
    return s
