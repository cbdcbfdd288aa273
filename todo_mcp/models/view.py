"""List view models produced by the renderer."""

from pydantic import BaseModel, Field

from todo_mcp.enums import Priority, ViewKind
from todo_mcp.models.filters import FilterState


class TaskRow(BaseModel):
    """One rendered task row."""

    id: int
    title: str
    completed: bool
    priority: Priority
    due: str | None = None
    tags: list[str] = Field(default_factory=list)


class ListView(BaseModel):
    """Everything the list area needs to draw itself."""

    kind: ViewKind
    filters: FilterState = Field(default_factory=FilterState)
    rows: list[TaskRow] = Field(default_factory=list)
    active_count: int = 0
    completed_count: int = 0
    error: str | None = None
