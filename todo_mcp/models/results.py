"""Tagged results for list fetches."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from todo_mcp.models.task import TaskModel


class FetchOk(BaseModel):
    """Fetch succeeded; ``tasks`` may legitimately be empty."""

    kind: Literal["ok"] = "ok"
    tasks: list[TaskModel] = Field(default_factory=list)


class FetchErr(BaseModel):
    """Fetch failed: transport error, non-success status or malformed body."""

    kind: Literal["err"] = "err"
    reason: str


FetchResult = Annotated[FetchOk | FetchErr, Field(discriminator="kind")]
