"""Episode tools for tvdb-helper."""

from typing import Optional

from ..core.client import TvdbClient
from .common import run_tool

ORDERS = ("default", "dvd", "absolute")


def register_tools(mcp, client: TvdbClient):
    """Register episode tools with FastMCP."""

    @mcp.tool()
    def episode_details(episode_id: int, language: Optional[str] = None):
        """One episode by its TheTVDB id."""
        return run_tool(lambda: {"episode": client.get_episode_by_id(episode_id, language)})

    @mcp.tool()
    def episode_by_number(
        series_id: int,
        episode: int,
        season: Optional[int] = None,
        order: str = "default",
        language: Optional[str] = None,
    ):
        """
        One episode of a series by number.
        order: 'default' or 'dvd' (need season) or 'absolute' (season ignored).
        """
        order = (order or "default").lower()

        def body():
            if order not in ORDERS:
                raise ValueError(f"order must be one of {', '.join(ORDERS)}")
            if order == "absolute":
                ep = client.get_episode_by_absolute(series_id, episode, language)
            elif season is None:
                raise ValueError(f"season is required for {order} order")
            elif order == "dvd":
                ep = client.get_episode_by_dvd_order(series_id, season, episode, language)
            else:
                ep = client.get_episode_by_default_order(series_id, season, episode, language)
            return {"order": order, "episode": ep}

        return run_tool(body)
