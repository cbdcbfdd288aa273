"""Input models for Todo MCP tools."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from todo_mcp.enums import Priority, PriorityFilter, ResponseFormat, StatusFilter

# ============================================================================
# Query Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for refreshing and rendering the task list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class UpdateQueryInput(BaseModel):
    """Input model for changing search/filter values in the page URL.

    Fields left as None are not touched. An empty string clears the filter.
    """

    # Search text is sent exactly as typed.
    model_config = ConfigDict(str_strip_whitespace=False)

    q: str | None = Field(default=None, description="Search text; empty string clears the search")
    status: StatusFilter | None = Field(
        default=None, description="Status filter: 'active', 'completed' or '' for all tasks"
    )
    priority: PriorityFilter | None = Field(
        default=None, description="Priority filter: 'High', 'Medium', 'Low' or '' for any priority"
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )

    def to_updates(self) -> dict[str, str | None]:
        """Query string updates for the fields that were given."""
        updates: dict[str, str | None] = {}
        if self.q is not None:
            updates["q"] = self.q or None
        if self.status is not None:
            updates["status"] = self.status.value or None
        if self.priority is not None:
            updates["priority"] = self.priority.value or None
        return updates


class ClearFiltersInput(BaseModel):
    """Input model for removing every search/filter parameter."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class QueryStateInput(BaseModel):
    """Input model for inspecting the page URL and filter state."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' or 'json'",
    )


# ============================================================================
# Mutation Input Models
# ============================================================================


class AddTaskInput(BaseModel):
    """Input model for the add-task form.

    A blank title is accepted here and silently skipped by the page.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(default="", description="What needs to be done", max_length=1000)
    priority: Priority | None = Field(default=None, description="High, Medium or Low (default Medium)")
    due: date | None = Field(default=None, description="Due date (YYYY-MM-DD)")
    tags: str = Field(default="", description="Comma-separated tags (e.g. 'home, errands')")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class ToggleTaskInput(BaseModel):
    """Input model for flipping a task's completion."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="Task id", ge=1)
    completed: bool | None = Field(
        default=None,
        description="Current completion shown for the task; looked up from the loaded list when omitted",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class ModifyTaskInput(BaseModel):
    """Input model for a partial task update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="Task id", ge=1)
    title: str | None = Field(default=None, description="New title", min_length=1, max_length=1000)
    priority: Priority | None = Field(default=None, description="New priority: High, Medium or Low")
    due: date | None = Field(default=None, description="New due date (YYYY-MM-DD)")
    clear_due: bool = Field(default=False, description="Remove the due date")
    tags: str | None = Field(default=None, description="Replacement comma-separated tags (empty string clears)")
    completed: bool | None = Field(default=None, description="New completion state")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )

    @model_validator(mode="after")
    def check_due(self) -> "ModifyTaskInput":
        if self.clear_due and self.due is not None:
            raise ValueError("Use either 'due' or 'clear_due', not both")
        return self

    def to_fields(self) -> dict[str, object]:
        """JSON-ready PATCH body for the fields that were given."""
        fields: dict[str, object] = {}
        if self.title is not None:
            fields["title"] = self.title
        if self.priority is not None:
            fields["priority"] = self.priority.value
        if self.due is not None:
            fields["due"] = self.due.isoformat()
        elif self.clear_due:
            fields["due"] = None
        if self.tags is not None:
            fields["tags"] = self.tags
        if self.completed is not None:
            fields["completed"] = self.completed
        return fields


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="Task id", ge=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )
