"""Filter state carried in the page URL."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from todo_mcp.enums import PriorityFilter, StatusFilter

# Page query parameter -> backend query parameter
API_PARAM_NAMES: dict[str, str] = {
    "q": "search",
    "status": "status",
    "priority": "priority",
}

FILTER_KEYS: tuple[str, ...] = tuple(API_PARAM_NAMES)


class FilterState(BaseModel):
    """
    Search and filter values of the task page.

    Always rebuilt from the URL query string; never stored anywhere else.
    """

    model_config = ConfigDict(frozen=True)

    q: str = ""
    status: StatusFilter = StatusFilter.ALL
    priority: PriorityFilter = PriorityFilter.ALL

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: object) -> object:
        values = {s.value for s in StatusFilter}
        return v if v in values or isinstance(v, StatusFilter) else StatusFilter.ALL

    @field_validator("priority", mode="before")
    @classmethod
    def coerce_priority(cls, v: object) -> object:
        values = {p.value for p in PriorityFilter}
        return v if v in values or isinstance(v, PriorityFilter) else PriorityFilter.ALL

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> FilterState:
        """Project a query mapping onto the filter fields; absent keys mean no filter."""
        return cls(
            q=params.get("q") or "",
            status=params.get("status") or "",
            priority=params.get("priority") or "",
        )

    def to_api_params(self) -> dict[str, str]:
        """Backend query parameters for the non-empty filters only."""
        values = {"q": self.q, "status": self.status.value, "priority": self.priority.value}
        return {API_PARAM_NAMES[key]: value for key, value in values.items() if value}

    @property
    def is_empty(self) -> bool:
        return not (self.q or self.status.value or self.priority.value)
