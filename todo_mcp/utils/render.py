"""Projection of the loaded task collection into a list view."""

from datetime import date

from todo_mcp.enums import LoadState, StatusFilter, ViewKind
from todo_mcp.models.filters import FilterState
from todo_mcp.models.task import TaskModel
from todo_mcp.models.view import ListView, TaskRow


def _format_due(due: date | None) -> str | None:
    """Short due label, e.g. "Dec 5"."""
    if due is None:
        return None
    return f"{due:%b} {due.day}"


def _matches(task: TaskModel, filters: FilterState) -> bool:
    if filters.status == StatusFilter.ACTIVE and task.completed:
        return False
    if filters.status == StatusFilter.COMPLETED and not task.completed:
        return False
    if filters.priority.value and task.priority.value != filters.priority.value:
        return False
    return True


def _task_row(task: TaskModel) -> TaskRow:
    return TaskRow(
        id=task.id,
        title=task.title,
        completed=task.completed,
        priority=task.priority,
        due=_format_due(task.due),
        tags=task.display_tags,
    )


def build_list_view(
    tasks: list[TaskModel],
    load_state: LoadState,
    filters: FilterState,
    error: str | None = None,
) -> ListView:
    """
    Build the list view for the current page state.

    Pure function of its arguments. Status and priority filters are applied
    again here so the view stays correct against a backend that ignores them;
    search text is matched by the backend only.

    Args:
        tasks: Last accepted fetch result
        load_state: Current load state of the page
        filters: Current filter state
        error: Reason of the last failed fetch, if any

    Returns:
        ListView describing what the list area shows
    """
    if load_state in (LoadState.IDLE, LoadState.LOADING):
        return ListView(kind=ViewKind.LOADING, filters=filters)

    if load_state == LoadState.ERROR:
        return ListView(kind=ViewKind.ERROR, filters=filters, error=error or "Unknown error")

    rows = [_task_row(t) for t in tasks if _matches(t, filters)]
    completed_count = sum(1 for r in rows if r.completed)

    return ListView(
        kind=ViewKind.ITEMS if rows else ViewKind.EMPTY,
        filters=filters,
        rows=rows,
        active_count=len(rows) - completed_count,
        completed_count=completed_count,
    )
