"""Language and update feed tools for tvdb-helper."""

from ..core.client import TvdbClient
from ..utils.helpers import update_timeframe
from .common import run_tool


def register_tools(mcp, client: TvdbClient):

    @mcp.tool()
    def languages():
        """Languages TheTVDB has content in (abbreviation is what `language` params take)."""
        return run_tool(lambda: {"languages": client.get_languages()})

    @mcp.tool()
    def updates(timeframe: str = "day"):
        """Series, episodes and banners updated in the last day/week/month (or all)."""
        tf = update_timeframe(timeframe)

        def body():
            upd = client.get_updates(tf)
            return {
                "timeframe": tf,
                "time": upd["time"],
                "counts": {k: len(upd[k]) for k in ("Series", "Episode", "Banner")},
                "updates": upd,
            }

        return run_tool(body)
