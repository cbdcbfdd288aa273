"""Utility functions for Todo MCP."""

from todo_mcp.utils.formatters import _format_view, _format_view_concise, _format_view_markdown
from todo_mcp.utils.http import _get_tasks_json, _send_request
from todo_mcp.utils.parsers import _parse_task, _parse_tasks
from todo_mcp.utils.render import build_list_view

__all__ = [
    "_send_request",
    "_get_tasks_json",
    "_parse_task",
    "_parse_tasks",
    "build_list_view",
    "_format_view",
    "_format_view_concise",
    "_format_view_markdown",
]
