"""Series tools for tvdb-helper."""

from typing import Optional

from ..core.client import TvdbClient
from .common import run_tool


def register_tools(mcp, client: TvdbClient):
    """Register series tools with FastMCP."""

    @mcp.tool()
    def search_series(query: str, language: Optional[str] = None, limit: int = 10):
        """Search series by name. Returns the best matches first, as ranked by TheTVDB."""
        limit = min(max(limit, 1), 50)
        return run_tool(lambda: {
            "query": query,
            "results": client.get_series(query, language)[:limit],
        })

    @mcp.tool()
    def series_details(series_id: int, language: Optional[str] = None):
        """Base record of one series (genres and actor names already split into lists)."""
        return run_tool(lambda: {"series": client.get_series_by_id(series_id, language)})

    @mcp.tool()
    def series_full(series_id: int, language: Optional[str] = None):
        """Series record with every episode, actor and banner attached."""
        return run_tool(lambda: {"series": client.get_series_all_by_id(series_id, language)})
