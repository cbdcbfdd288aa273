"""Parser helpers for backend task data."""

from typing import Any

from todo_mcp.models.task import TaskModel


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: Dictionary from the backend JSON response

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """
    Parse a list of task dictionaries into TaskModel instances.

    Raises:
        pydantic.ValidationError: if any record is not a valid task
    """
    return [_parse_task(t) for t in tasks]
