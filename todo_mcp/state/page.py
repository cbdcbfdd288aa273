"""The task page: filter state, loaded tasks and their load state."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from enum import Enum

from todo_mcp.client.api import TodoApiClient
from todo_mcp.enums import LoadState, Priority
from todo_mcp.models.filters import FILTER_KEYS
from todo_mcp.models.results import FetchOk
from todo_mcp.models.task import TaskModel
from todo_mcp.models.view import ListView
from todo_mcp.state.query import QueryStateStore
from todo_mcp.utils.render import build_list_view

logger = logging.getLogger(__name__)

_TRANSITIONS: dict[LoadState, set[LoadState]] = {
    LoadState.IDLE: {LoadState.LOADING},
    LoadState.LOADING: {LoadState.LOADING, LoadState.READY, LoadState.ERROR},
    LoadState.READY: {LoadState.LOADING},
    LoadState.ERROR: {LoadState.LOADING},
}


class TaskPage:
    """
    Single owner of the page state.

    Every change goes through one of the methods below, all of which run on
    the event loop. Each refresh takes a new request token; a response is
    applied only if its token is still the newest one issued, so overlapping
    fetches settle on the most recently requested filters.
    """

    def __init__(self, api: TodoApiClient, store: QueryStateStore | None = None):
        self.api = api
        self.store = store or QueryStateStore()
        self._tasks: list[TaskModel] = []
        self._state = LoadState.IDLE
        self._error: str | None = None
        self._latest_token = 0

    # --- state

    @property
    def tasks(self) -> list[TaskModel]:
        return list(self._tasks)

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state == LoadState.LOADING

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def view(self) -> ListView:
        return build_list_view(self._tasks, self._state, self.store.filter_state, self._error)

    def find_task(self, task_id: int) -> TaskModel | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def _transition(self, new_state: LoadState) -> None:
        if new_state not in _TRANSITIONS[self._state]:
            raise RuntimeError(f"Invalid load state transition {self._state.value} -> {new_state.value}")
        self._state = new_state

    # --- reads

    async def refresh(self) -> bool:
        """
        Refetch the list for the current filters.

        Returns:
            False if the response was superseded by a newer request and dropped
        """
        self._latest_token += 1
        token = self._latest_token
        filters = self.store.filter_state
        self._transition(LoadState.LOADING)

        try:
            result = await self.api.load_tasks(filters)
        except BaseException as e:
            # Never leave the newest request stuck in LOADING.
            if token == self._latest_token:
                self._tasks = []
                self._error = f"Error: Task list fetch interrupted - {type(e).__name__}"
                self._transition(LoadState.ERROR)
            raise

        if token != self._latest_token:
            logger.debug("Dropping stale response for token %d (latest %d)", token, self._latest_token)
            return False

        if isinstance(result, FetchOk):
            self._tasks = result.tasks
            self._error = None
            self._transition(LoadState.READY)
        else:
            self._tasks = []
            self._error = result.reason
            self._transition(LoadState.ERROR)
        return True

    async def update_query(self, updates: Mapping[str, str | Enum | None]) -> ListView:
        """Merge filter values into the URL and refetch if the filters changed."""
        changed = self.store.update_query(updates)
        if changed or self._state == LoadState.IDLE:
            await self.refresh()
        return self.view

    async def clear_filters(self) -> ListView:
        return await self.update_query({key: None for key in FILTER_KEYS})

    # --- mutations

    async def add_task(
        self,
        title: str,
        priority: Priority | None = None,
        due: date | None = None,
        tags: str = "",
    ) -> bool:
        """Create a task and refetch. A blank title does nothing at all."""
        if not title or not title.strip():
            return False
        try:
            return await self.api.create_task(title, priority=priority, due=due, tags=tags)
        finally:
            await self.refresh()

    async def toggle_task(self, task_id: int, current_completed: bool) -> bool:
        try:
            return await self.api.toggle_task(task_id, current_completed)
        finally:
            await self.refresh()

    async def update_task(self, task_id: int, **fields: object) -> bool:
        """Partial update and refetch. An empty update does nothing at all."""
        if not fields:
            return False
        try:
            return await self.api.update_task(task_id, **fields)
        finally:
            await self.refresh()

    async def delete_task(self, task_id: int) -> bool:
        try:
            return await self.api.delete_task(task_id)
        finally:
            await self.refresh()
