"""Pytest configuration and fixtures for todo-mcp tests."""

import json

import httpx
import pytest

from todo_mcp import QueryStateStore, TaskPage, TodoApiClient, set_page

BASE_URL = "http://backend.test"


class FakeBackend:
    """In-memory stand-in for the task REST backend, served through httpx.MockTransport."""

    def __init__(self, tasks=None):
        self.tasks = [dict(t) for t in (tasks or [])]
        self.requests: list[httpx.Request] = []
        self.fail_status: int | None = None
        self.next_id = max((t["id"] for t in self.tasks), default=0) + 1

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"detail": "backend failure"})

        path = request.url.path
        if path == "/tasks" and request.method == "GET":
            return httpx.Response(200, json=self._list(request.url.params))
        if path == "/tasks" and request.method == "POST":
            body = json.loads(request.content)
            task = {"id": self.next_id, "completed": False, **body}
            self.next_id += 1
            self.tasks.append(task)
            return httpx.Response(201, json=task)
        if path.startswith("/tasks/"):
            task_id = int(path.rsplit("/", 1)[1])
            task = next((t for t in self.tasks if t["id"] == task_id), None)
            if task is None:
                return httpx.Response(404, json={"detail": "Task not found"})
            if request.method == "PATCH":
                task.update(json.loads(request.content))
                return httpx.Response(200, json=task)
            if request.method == "DELETE":
                self.tasks.remove(task)
                return httpx.Response(204)
        return httpx.Response(405)

    def _list(self, params: httpx.QueryParams) -> list[dict]:
        rows = self.tasks
        if search := params.get("search"):
            rows = [t for t in rows if search.lower() in t["title"].lower()]
        if params.get("status") == "active":
            rows = [t for t in rows if not t["completed"]]
        elif params.get("status") == "completed":
            rows = [t for t in rows if t["completed"]]
        if priority := params.get("priority"):
            rows = [t for t in rows if t.get("priority") == priority]
        return rows

    @property
    def mutations(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method != "GET"]


def make_api(handler) -> TodoApiClient:
    """TodoApiClient whose requests are answered by ``handler``."""
    return TodoApiClient(httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL))


def make_page(handler, url: str = "/") -> TaskPage:
    return TaskPage(make_api(handler), QueryStateStore(url))


@pytest.fixture
def sample_tasks():
    """Backend task records."""
    return [
        {
            "id": 1,
            "title": "Buy milk",
            "completed": False,
            "priority": "High",
            "due": "2025-12-05",
            "tags": "errands, home",
        },
        {
            "id": 2,
            "title": "Write report",
            "completed": True,
            "priority": "Medium",
            "due": None,
            "tags": "",
        },
        {
            "id": 3,
            "title": "Water plants",
            "completed": False,
            "priority": "Low",
            "due": None,
            "tags": "home",
        },
    ]


@pytest.fixture
def backend(sample_tasks):
    return FakeBackend(sample_tasks)


@pytest.fixture
def empty_backend():
    return FakeBackend()


@pytest.fixture
def page(backend):
    return make_page(backend)


@pytest.fixture
def installed_page(page):
    """The page the MCP tools operate on, reset after the test."""
    set_page(page)
    yield page
    set_page(None)


@pytest.fixture
def page_factory():
    """Build a page served by an arbitrary request handler."""
    return make_page


@pytest.fixture
def api_factory():
    """Build an API client served by an arbitrary request handler."""
    return make_api
