"""Core task models for Todo MCP."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_mcp.enums import Priority


def split_tags(tags: str | None) -> list[str]:
    """
    Split a comma-separated tag string into display labels.

    Segments are trimmed, empty ones dropped, duplicates removed while
    keeping first-seen order.

    Examples:
        >>> split_tags("a, b,,c ")
        ['a', 'b', 'c']
    """
    if not tags:
        return []
    labels: list[str] = []
    for part in tags.split(","):
        label = part.strip()
        if label and label not in labels:
            labels.append(label)
    return labels


class TaskModel(BaseModel):
    """A task as returned by the backend. The client never assigns ids."""

    model_config = ConfigDict(extra="allow")

    id: int
    title: str = Field(..., min_length=1)
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due: date | None = None
    tags: str = ""

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, v: object) -> object:
        # Backend rows may carry a null or empty priority.
        return v or Priority.MEDIUM

    @field_validator("due", mode="before")
    @classmethod
    def parse_due(cls, v: object) -> object:
        if v in (None, ""):
            return None
        # Accept full timestamps ("2025-02-01T00:00:00Z") by keeping the date part.
        if isinstance(v, str) and len(v) > 10 and v[10] in "T ":
            return v[:10]
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: object) -> object:
        if v is None:
            return ""
        if isinstance(v, list):
            return ",".join(str(t) for t in v)
        return v

    @property
    def display_tags(self) -> list[str]:
        return split_tags(self.tags)
