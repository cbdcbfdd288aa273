"""Page URL holder; the filter state is a projection of its query string."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

import httpx

from todo_mcp.models.filters import FilterState

logger = logging.getLogger(__name__)


def _build_url(path: str, params: httpx.QueryParams) -> str:
    query = str(params)
    return f"{path or '/'}?{query}" if query else (path or "/")


class QueryStateStore:
    """
    Holds the page address and derives ``FilterState`` from it.

    ``update_query`` rewrites the current history entry in place (replace
    semantics); only ``navigate`` adds an entry.
    """

    def __init__(self, url: str = "/"):
        self._history: list[str] = []
        self.navigate(url)

    # --- projections

    @property
    def url(self) -> str:
        return self._history[-1]

    @property
    def params(self) -> httpx.QueryParams:
        return httpx.URL(self.url).params

    @property
    def query_string(self) -> str:
        return str(self.params)

    @property
    def filter_state(self) -> FilterState:
        return FilterState.from_query(self.params)

    @property
    def history(self) -> list[str]:
        return list(self._history)

    # --- updates

    def update_query(self, updates: Mapping[str, str | Enum | None]) -> bool:
        """
        Merge ``updates`` into the query string.

        A None or empty value removes the key, anything else sets it. Keys
        not named in ``updates`` are left as they are.

        Returns:
            True if the filter state changed
        """
        before = self.filter_state
        params = self.params
        for key, value in updates.items():
            if isinstance(value, Enum):
                value = value.value
            params = params.set(key, value) if value else params.remove(key)

        self._history[-1] = _build_url(httpx.URL(self.url).path, params)

        changed = self.filter_state != before
        logger.debug("Query replaced: %s (filters changed: %s)", self.url, changed)
        return changed

    def navigate(self, url: str) -> None:
        """Push a new history entry."""
        parsed = httpx.URL(url)
        self._history.append(_build_url(parsed.path, parsed.params))
