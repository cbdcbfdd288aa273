"""Pydantic models for Todo MCP."""

from todo_mcp.models.filters import API_PARAM_NAMES, FILTER_KEYS, FilterState
from todo_mcp.models.inputs import (
    AddTaskInput,
    ClearFiltersInput,
    DeleteTaskInput,
    ListTasksInput,
    ModifyTaskInput,
    QueryStateInput,
    ToggleTaskInput,
    UpdateQueryInput,
)
from todo_mcp.models.results import FetchErr, FetchOk, FetchResult
from todo_mcp.models.task import TaskModel, split_tags
from todo_mcp.models.view import ListView, TaskRow

__all__ = [
    # Task models
    "TaskModel",
    "split_tags",
    # Filter state
    "FilterState",
    "API_PARAM_NAMES",
    "FILTER_KEYS",
    # Fetch results
    "FetchOk",
    "FetchErr",
    "FetchResult",
    # View models
    "ListView",
    "TaskRow",
    # Tool input models
    "ListTasksInput",
    "UpdateQueryInput",
    "ClearFiltersInput",
    "QueryStateInput",
    "AddTaskInput",
    "ToggleTaskInput",
    "ModifyTaskInput",
    "DeleteTaskInput",
]
