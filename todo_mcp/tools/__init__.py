"""MCP tool definitions for the task page."""

# Import all tools to register them with the MCP server
from todo_mcp.tools.core import (
    todo_add,
    todo_clear_filters,
    todo_delete,
    todo_list,
    todo_modify,
    todo_query,
    todo_toggle,
    todo_update_query,
)

__all__ = [
    # Query tools
    "todo_list",
    "todo_update_query",
    "todo_clear_filters",
    "todo_query",
    # Mutation tools
    "todo_add",
    "todo_toggle",
    "todo_modify",
    "todo_delete",
]
