"""Core MCP tool definitions for the task page."""

import json

from mcp.types import ToolAnnotations

from todo_mcp.enums import ResponseFormat
from todo_mcp.models.inputs import (
    AddTaskInput,
    ClearFiltersInput,
    DeleteTaskInput,
    ListTasksInput,
    ModifyTaskInput,
    QueryStateInput,
    ToggleTaskInput,
    UpdateQueryInput,
)
from todo_mcp.server import get_page, mcp
from todo_mcp.utils.formatters import _describe_filters, _format_view

# ============================================================================
# Query Tools
# ============================================================================


@mcp.tool(
    name="todo_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todo_list(params: ListTasksInput) -> str:
    """
    Refetch and show the task list for the current search and filters.

    USE THIS WHEN:
    - Looking at the current tasks
    - Checking the result of an earlier change

    DO NOT USE WHEN:
    - You want to change the search or filters → use todo_update_query instead

    Args:
        params: ListTasksInput with response_format

    Returns:
        The rendered list (markdown, concise or JSON)
    """
    page = get_page()
    await page.refresh()
    return _format_view(page.view, params.response_format)


@mcp.tool(
    name="todo_update_query",
    annotations=ToolAnnotations(
        title="Search and Filter Tasks",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todo_update_query(params: UpdateQueryInput) -> str:
    """
    Change the search text and/or filters, then show the refetched list.

    Only the fields you pass are changed; the others keep their values.
    Pass an empty string to clear a single filter.

    Args:
        params: UpdateQueryInput with q, status, priority and response_format

    Returns:
        The rendered list for the new filters

    Examples:
        - Search: params with q="milk"
        - Only open tasks: params with status="active"
        - High priority, any status: params with priority="High", status=""
    """
    page = get_page()
    view = await page.update_query(params.to_updates())
    return _format_view(view, params.response_format)


@mcp.tool(
    name="todo_clear_filters",
    annotations=ToolAnnotations(
        title="Clear Search and Filters",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todo_clear_filters(params: ClearFiltersInput) -> str:
    """Remove the search text and every filter, then show the refetched list."""
    page = get_page()
    view = await page.clear_filters()
    return _format_view(view, params.response_format)


@mcp.tool(
    name="todo_query",
    annotations=ToolAnnotations(
        title="Show Page Address",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_query(params: QueryStateInput) -> str:
    """
    Show the page address and the filter state it encodes.

    Does not contact the backend.
    """
    page = get_page()
    filters = page.store.filter_state

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"url": page.store.url, "filters": filters.model_dump(mode="json"), "state": page.state.value},
            indent=2,
        )

    described = _describe_filters(filters) or "none"
    return f"URL: {page.store.url}\nFilters: {described}\nList: {page.state.value}"


# ============================================================================
# Mutation Tools
# ============================================================================


@mcp.tool(
    name="todo_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todo_add(params: AddTaskInput) -> str:
    """
    Add a task and show the refetched list.

    A blank title is ignored: nothing is sent and the list is left as is.

    Args:
        params: AddTaskInput with title, priority (default Medium), due, tags

    Returns:
        The rendered list

    Examples:
        - Simple task: params with title="Buy milk"
        - Full form: params with title="File taxes", priority="High", due="2025-04-15", tags="admin, money"
    """
    page = get_page()
    if not params.title:
        return "Nothing to add: the title is empty."

    await page.add_task(params.title, priority=params.priority, due=params.due, tags=params.tags)
    return _format_view(page.view, params.response_format)


@mcp.tool(
    name="todo_toggle",
    annotations=ToolAnnotations(
        title="Toggle Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todo_toggle(params: ToggleTaskInput) -> str:
    """
    Flip a task between done and not done, then show the refetched list.

    The new value is the negation of the completion currently shown. When
    ``completed`` is omitted it is read from the loaded list.

    Args:
        params: ToggleTaskInput with task_id and optional completed

    Returns:
        The rendered list
    """
    page = get_page()
    current = params.completed
    if current is None:
        task = page.find_task(params.task_id)
        if task is None:
            return (
                f"Error: Task {params.task_id} is not in the loaded list.\n"
                f"Tip: Use todo_list to refresh, or pass 'completed' explicitly."
            )
        current = task.completed

    await page.toggle_task(params.task_id, current)
    return _format_view(page.view, params.response_format)


@mcp.tool(
    name="todo_modify",
    annotations=ToolAnnotations(
        title="Modify Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todo_modify(params: ModifyTaskInput) -> str:
    """
    Change a task's title, priority, due date, tags or completion.

    Only the given fields are sent. Use clear_due=True to remove the due date
    and tags="" to remove all tags.

    Args:
        params: ModifyTaskInput with task_id and fields to change

    Returns:
        The rendered list
    """
    fields = params.to_fields()
    if not fields:
        return f"Nothing to change for task {params.task_id}."

    page = get_page()
    await page.update_task(params.task_id, **fields)
    return _format_view(page.view, params.response_format)


@mcp.tool(
    name="todo_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todo_delete(params: DeleteTaskInput) -> str:
    """
    Delete a task and show the refetched list.

    There is no confirmation and no undo.
    """
    page = get_page()
    await page.delete_task(params.task_id)
    return _format_view(page.view, params.response_format)
