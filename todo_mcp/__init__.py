"""
MCP Server for a todo REST backend.

The server holds one task page: a URL whose query string carries the search
and filter state, the task list last fetched for it, and its load state.
Tools search, filter, add, toggle, modify and delete tasks against the
backend; every change is followed by a full refetch.
"""

# Re-export enums
from todo_mcp.enums import LoadState, Priority, PriorityFilter, ResponseFormat, StatusFilter, ViewKind

# Re-export models
from todo_mcp.models import (
    AddTaskInput,
    ClearFiltersInput,
    DeleteTaskInput,
    FetchErr,
    FetchOk,
    FilterState,
    ListTasksInput,
    ListView,
    ModifyTaskInput,
    QueryStateInput,
    TaskModel,
    TaskRow,
    ToggleTaskInput,
    UpdateQueryInput,
    split_tags,
)

# Re-export settings and client-side state
from todo_mcp.client import TodoApiClient
from todo_mcp.config import Settings, get_settings
from todo_mcp.state import QueryStateStore, TaskPage

# Re-export MCP server instance
from todo_mcp.server import close_page, get_page, mcp, set_page

# Re-export tools
from todo_mcp.tools import (
    todo_add,
    todo_clear_filters,
    todo_delete,
    todo_list,
    todo_modify,
    todo_query,
    todo_toggle,
    todo_update_query,
)

# Re-export utilities (including private functions used by tests)
from todo_mcp.utils import (
    _format_view,
    _format_view_concise,
    _format_view_markdown,
    _get_tasks_json,
    _parse_task,
    _parse_tasks,
    _send_request,
    build_list_view,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "Priority",
    "StatusFilter",
    "PriorityFilter",
    "LoadState",
    "ViewKind",
    # Models
    "TaskModel",
    "split_tags",
    "FilterState",
    "FetchOk",
    "FetchErr",
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
    # Settings and state
    "Settings",
    "get_settings",
    "TodoApiClient",
    "QueryStateStore",
    "TaskPage",
    # Utility functions
    "_send_request",
    "_get_tasks_json",
    "_parse_task",
    "_parse_tasks",
    "build_list_view",
    "_format_view",
    "_format_view_concise",
    "_format_view_markdown",
    # Tools
    "todo_list",
    "todo_update_query",
    "todo_clear_filters",
    "todo_query",
    "todo_add",
    "todo_toggle",
    "todo_modify",
    "todo_delete",
    # MCP server
    "mcp",
    "get_page",
    "set_page",
    "close_page",
]
