"""HTTP utilities for talking to the task backend."""

import logging
from typing import Any

import httpx

from todo_mcp.models.filters import FilterState

logger = logging.getLogger(__name__)

# Every list read goes to the network.
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


async def _send_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    params: dict[str, str] | None = None,
    json_body: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> tuple[bool, httpx.Response | str]:
    """
    Send one request to the backend and classify the outcome.

    Args:
        client: Client bound to the backend base URL
        method: HTTP method
        path: Path relative to the base URL (e.g. "/tasks/3")
        params: Optional query parameters
        json_body: Optional JSON request body
        headers: Optional extra headers

    Returns:
        Tuple of (success: bool, response: httpx.Response | error: str).
        Success means the request completed with a 2xx status.
    """
    try:
        request = client.build_request(method, path, params=params, json=json_body, headers=headers)
    except (TypeError, ValueError) as e:
        return False, f"Error: {method} {path} could not be encoded - {e}"

    try:
        response = await client.send(request)
    except httpx.TimeoutException:
        return False, f"Error: {method} {path} timed out"
    except httpx.RequestError as e:
        return False, f"Error: {method} {path} failed - {type(e).__name__}: {e}"

    if not response.is_success:
        return False, f"Error: {method} {path} returned HTTP {response.status_code}"

    return True, response


async def _get_tasks_json(
    client: httpx.AsyncClient,
    filters: FilterState,
) -> tuple[bool, list[dict[str, Any]] | str]:
    """
    Get raw task records from the backend for the given filters.

    Only non-empty filters are sent, under the backend's parameter names.

    Args:
        client: Client bound to the backend base URL
        filters: Current filter state

    Returns:
        Tuple of (success: bool, tasks: List[dict] | error: str)
    """
    success, result = await _send_request(
        client, "GET", "/tasks", params=filters.to_api_params(), headers=NO_CACHE_HEADERS
    )
    if not success or isinstance(result, str):
        return False, str(result)

    try:
        data = result.json()
    except ValueError as e:
        return False, f"Error: Failed to parse task list - {e}"

    if data is None:
        return True, []
    if not isinstance(data, list):
        return False, f"Error: Expected a JSON array of tasks, got {type(data).__name__}"
    return True, data
