"""FastMCP server initialization for Todo MCP."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from todo_mcp.client.api import TodoApiClient
from todo_mcp.config import get_settings
from todo_mcp.logging_setup import setup_logging
from todo_mcp.state.page import TaskPage
from todo_mcp.state.query import QueryStateStore

_page: TaskPage | None = None


def get_page() -> TaskPage:
    """The page driven by the tools, built from settings on first use."""
    global _page
    if _page is None:
        settings = get_settings()
        _page = TaskPage(TodoApiClient.from_settings(settings), QueryStateStore(settings.page_url))
    return _page


def set_page(page: TaskPage | None) -> None:
    """Replace the page driven by the tools (None rebuilds it on next use)."""
    global _page
    _page = page


async def close_page() -> None:
    """Close the page's HTTP client and forget the page."""
    global _page
    if _page is not None:
        page, _page = _page, None
        await page.api.aclose()


@asynccontextmanager
async def _lifespan(server: FastMCP) -> AsyncIterator[None]:
    try:
        yield
    finally:
        await close_page()


# Initialize the MCP server
mcp = FastMCP("todo_mcp", lifespan=_lifespan)


def run() -> None:
    """Run the MCP server."""
    setup_logging(get_settings().log_level)
    mcp.run()


if __name__ == "__main__":
    run()
