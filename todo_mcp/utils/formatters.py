"""Formatting utilities for list view output."""

import json

from todo_mcp.enums import ResponseFormat, ViewKind
from todo_mcp.models.filters import FilterState
from todo_mcp.models.view import ListView, TaskRow

EMPTY_TITLE = "No tasks yet"
EMPTY_HINT = "Add one above and start winning!"
LOADING_TEXT = "Loading tasks..."


def _describe_filters(filters: FilterState) -> str:
    """Human-readable summary of active filters, or an empty string."""
    if filters.is_empty:
        return ""
    parts = []
    if filters.q:
        parts.append(f"search:'{filters.q}'")
    if filters.status.value:
        parts.append(f"status:{filters.status.value}")
    if filters.priority.value:
        parts.append(f"priority:{filters.priority.value}")
    return " ".join(parts)


def _format_row_concise(row: TaskRow) -> str:
    """
    Format a single row in concise format.

    Output: "#5 [x] Water plants (High, due:Dec 5, tags:home,garden)"
    """
    check = "x" if row.completed else " "
    meta = [row.priority.value]
    if row.due:
        meta.append(f"due:{row.due}")
    if row.tags:
        meta.append(f"tags:{','.join(row.tags)}")
    return f"#{row.id} [{check}] {row.title} ({', '.join(meta)})"


def _format_row_markdown(row: TaskRow) -> str:
    """Format a single row as markdown."""
    title = f"~~{row.title}~~" if row.completed else row.title
    lines = [f"- [{'x' if row.completed else ' '}] **#{row.id}** {title}"]

    details = [f"**Priority**: {row.priority.value}"]
    if row.due:
        details.append(f"**Due**: {row.due}")
    if row.tags:
        details.append(f"**Tags**: {', '.join(row.tags)}")
    lines.append("  " + " | ".join(details))

    return "\n".join(lines)


def _format_view_concise(view: ListView) -> str:
    """
    Format a list view in concise format.

    Output:
    2 task(s) | status:active
    #1 [ ] Task one (High)
    #2 [ ] Task two (Medium)
    """
    if view.kind == ViewKind.LOADING:
        return LOADING_TEXT
    if view.kind == ViewKind.ERROR:
        return f"Error: could not load tasks ({view.error})"
    if view.kind == ViewKind.EMPTY:
        return "0 tasks"

    header = f"{len(view.rows)} task(s)"
    described = _describe_filters(view.filters)
    if described:
        header = f"{header} | {described}"
    return "\n".join([header] + [_format_row_concise(r) for r in view.rows])


def _format_view_markdown(view: ListView, title: str = "My Tasks") -> str:
    """Format a list view as markdown."""
    lines = [f"# {title}"]
    described = _describe_filters(view.filters)
    if described:
        lines.append(f"*Filters: {described}*")
    lines.append("")

    if view.kind == ViewKind.LOADING:
        lines.append(LOADING_TEXT)
    elif view.kind == ViewKind.ERROR:
        lines.append("**Could not load tasks.**")
        lines.append(f"{view.error}")
    elif view.kind == ViewKind.EMPTY:
        lines.append(f"## {EMPTY_TITLE}")
        lines.append(EMPTY_HINT)
    else:
        lines.append(f"*{view.active_count} active, {view.completed_count} done*")
        lines.append("")
        for row in view.rows:
            lines.append(_format_row_markdown(row))

    return "\n".join(lines)


def _format_view(view: ListView, response_format: ResponseFormat) -> str:
    """Render a list view in the requested format."""
    if response_format == ResponseFormat.JSON:
        return json.dumps(view.model_dump(mode="json"), indent=2)
    if response_format == ResponseFormat.CONCISE:
        return _format_view_concise(view)
    return _format_view_markdown(view)
