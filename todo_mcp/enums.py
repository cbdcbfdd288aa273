"""Enums for Todo MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class Priority(str, Enum):
    """Task priority levels as stored by the backend."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class StatusFilter(str, Enum):
    """Status filter options carried in the page URL."""

    ALL = ""
    ACTIVE = "active"
    COMPLETED = "completed"


class PriorityFilter(str, Enum):
    """Priority filter options carried in the page URL."""

    ALL = ""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class LoadState(str, Enum):
    """Lifecycle of the task list: Idle -> Loading -> Ready/Error."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ViewKind(str, Enum):
    """What the list area shows."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    ITEMS = "items"
