"""Async client for the task backend's REST API."""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Any

import httpx
from pydantic import ValidationError

from todo_mcp.config import Settings
from todo_mcp.enums import Priority
from todo_mcp.models.filters import FilterState
from todo_mcp.models.results import FetchErr, FetchOk, FetchResult
from todo_mcp.models.task import TaskModel
from todo_mcp.utils.http import _get_tasks_json, _send_request
from todo_mcp.utils.parsers import _parse_tasks

logger = logging.getLogger(__name__)


def _json_value(value: Any) -> Any:
    """Make a field value JSON-ready (dates as ISO strings, enums by value)."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


class TodoApiClient:
    """
    Reads and mutations against ``/tasks``.

    Nothing here raises on a failed request: reads come back as an empty
    list or a ``FetchErr``, mutations as ``False``.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    @classmethod
    def from_settings(cls, settings: Settings) -> TodoApiClient:
        http = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            headers={"Accept": "application/json"},
        )
        return cls(http)

    async def aclose(self) -> None:
        await self._http.aclose()

    # --- reads

    async def load_tasks(self, filters: FilterState) -> FetchResult:
        """Fetch tasks for ``filters`` as a tagged result."""
        success, result = await _get_tasks_json(self._http, filters)
        if not success or isinstance(result, str):
            logger.warning("Task list fetch failed: %s", result)
            return FetchErr(reason=str(result))

        try:
            tasks = _parse_tasks(result)
        except (ValidationError, TypeError) as e:
            logger.warning("Task list contained invalid records: %s", e)
            return FetchErr(reason=f"Error: Malformed task data - {e}")

        logger.debug("Fetched %d task(s) for %s", len(tasks), filters.to_api_params())
        return FetchOk(tasks=tasks)

    async def fetch_tasks(self, filters: FilterState) -> list[TaskModel]:
        """Fetch tasks for ``filters``; any failure yields an empty list."""
        result = await self.load_tasks(filters)
        if isinstance(result, FetchOk):
            return result.tasks
        return []

    # --- mutations

    async def create_task(
        self,
        title: str,
        priority: Priority | str | None = None,
        due: date | None = None,
        tags: str | None = None,
    ) -> bool:
        """
        Create a task. A blank title sends nothing and returns False.

        Args:
            title: Task title; surrounding whitespace is removed
            priority: High, Medium or Low; Medium when unset
            due: Optional due date
            tags: Comma-separated tags; empty when unset

        Returns:
            True if the backend accepted the request
        """
        title = (title or "").strip()
        if not title:
            logger.debug("Skipping task creation: blank title")
            return False

        payload = {
            "title": title,
            "priority": Priority(priority).value if priority else Priority.MEDIUM.value,
            "due": due.isoformat() if due else None,
            "tags": tags or "",
        }
        return await self._mutate("POST", "/tasks", payload)

    async def update_task(self, task_id: int, **fields: Any) -> bool:
        """PATCH a partial update; an empty update sends nothing."""
        if not fields:
            logger.debug("Skipping update of task %s: no fields", task_id)
            return False
        payload = {key: _json_value(value) for key, value in fields.items()}
        return await self._mutate("PATCH", f"/tasks/{task_id}", payload)

    async def toggle_task(self, task_id: int, current_completed: bool) -> bool:
        """Flip completion: sends the negation of the state shown to the user."""
        return await self.update_task(task_id, completed=not current_completed)

    async def delete_task(self, task_id: int) -> bool:
        return await self._mutate("DELETE", f"/tasks/{task_id}")

    async def _mutate(self, method: str, path: str, payload: dict[str, Any] | None = None) -> bool:
        success, result = await _send_request(self._http, method, path, json_body=payload)
        if not success:
            logger.warning("Mutation failed: %s", result)
            return False
        logger.info("%s %s ok", method, path)
        return True
