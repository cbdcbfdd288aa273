"""Client-side page state."""

from todo_mcp.state.page import TaskPage
from todo_mcp.state.query import QueryStateStore

__all__ = ["QueryStateStore", "TaskPage"]
