"""Actor and banner tools for tvdb-helper."""

from typing import Optional

from ..core.client import TvdbClient
from .common import run_tool


def register_tools(mcp, client: TvdbClient):
    """Register actor/banner tools with FastMCP."""

    @mcp.tool()
    def series_actors(series_id: int):
        """Cast of a series, in TheTVDB sort order."""
        return run_tool(lambda: {"seriesId": series_id, "actors": client.get_actors(series_id)})

    @mcp.tool()
    def series_banners(series_id: int, banner_type: Optional[str] = None, language: Optional[str] = None):
        """
        Banners/posters/fanart of a series.
        banner_type: optional filter (fanart, poster, season, series).
        """
        def body():
            banners = client.get_banners(series_id)
            if banner_type:
                banners = [b for b in banners if (b.get("BannerType") or "").lower() == banner_type.lower()]
            if language:
                banners = [b for b in banners if b.get("Language") == language]
            for b in banners:
                b["url"] = client.banner_url(b.get("BannerPath") or "")
            return {"seriesId": series_id, "banners": banners}

        return run_tool(body)

    @mcp.tool()
    def download_banner(banner_path: str, filename: str):
        """Download a banner image (BannerPath from series_banners) to a local file."""
        return run_tool(lambda: {"path": str(client.download_banner(banner_path, filename))})
