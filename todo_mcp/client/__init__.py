"""REST client for the task backend."""

from todo_mcp.client.api import TodoApiClient

__all__ = ["TodoApiClient"]
