"""Metadata and help tools for tvdb-helper."""

from importlib.metadata import version, PackageNotFoundError

from ..core.config import TvdbConfig
from ..core.http_client import SCHEMA

# Version info
try:
    __VERSION__ = version("tvdb-helper")
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"


def health(config: TvdbConfig):
    """Health check endpoint."""
    return {"schemaVersion": SCHEMA, "ok": True, "sources": ["thetvdb"], "apiKey": bool(config.api_key)}


def help():
    """Use cases and invocation examples (for hosts and users)."""
    return {
        "schemaVersion": SCHEMA,
        "name": "tvdb-helper",
        "version": __VERSION__,
        "summary": "TV series, episode, cast and artwork lookups against TheTVDB XML API.",
        "features": [
            "search_series: search by series name",
            "series_details: base series record (Genre/Actors as lists)",
            "series_full: series + all episodes, actors and banners (zip endpoint)",
            "episode_details: episode by id",
            "episode_by_number: episode by season/number (default or dvd order) or absolute number",
            "series_actors / series_banners: cast and artwork",
            "download_banner: save a banner image locally",
            "languages: available content languages",
            "updates(timeframe): updated series/episodes/banners (day/week/month/all)",
        ],
        "examples": [
            {"title": "Search", "prompt": "tvdb-helper__search_series {\"query\":\"The Wire\"}"},
            {"title": "Full series", "prompt": "tvdb-helper__series_full {\"series_id\":79126}"},
            {"title": "Episode S01E03", "prompt": "tvdb-helper__episode_by_number {\"series_id\":79126,\"season\":1,\"episode\":3}"},
            {"title": "DVD order", "prompt": "tvdb-helper__episode_by_number {\"series_id\":78874,\"season\":1,\"episode\":2,\"order\":\"dvd\"}"},
            {"title": "Posters", "prompt": "tvdb-helper__series_banners {\"series_id\":79126,\"banner_type\":\"poster\"}"},
            {"title": "Weekly updates", "prompt": "tvdb-helper__updates {\"timeframe\":\"week\"}"},
        ],
        "notes": [
            "Needs TVDB_API_KEY (search_series works without it).",
            "TVDB_LANGUAGE sets the default language; most tools accept `language`.",
            "Always returns schemaVersion, on success and on error.",
        ],
    }


def help_text():
    """Plain-text version of help (for minimal hosts)."""
    return (
        "tvdb-helper · What I can do:\n"
        "- search_series(query, language, limit): find series by name.\n"
        "- series_details(series_id) / series_full(series_id): series record, optionally with episodes, actors, banners.\n"
        "- episode_details(episode_id): one episode.\n"
        "- episode_by_number(series_id, episode, season, order='default'|'dvd'|'absolute').\n"
        "- series_actors(series_id) / series_banners(series_id, banner_type).\n"
        "- download_banner(banner_path, filename).\n"
        "- languages() / updates(timeframe='day'|'week'|'month'|'all').\n"
    )


def about(config: TvdbConfig):
    """About information for the service."""
    return {
        "schemaVersion": SCHEMA,
        "name": "tvdb-helper",
        "version": __VERSION__,
        "endpoints": {"thetvdb": f"{config.mirror}/api"},
        "language": config.language,
        "limits": {"timeoutSec": config.timeout},
    }


def register_tools(mcp, config: TvdbConfig):
    """Register meta/help tools with FastMCP."""
    @mcp.tool(name="health")
    def _health():
        """Health check endpoint."""
        return health(config)

    @mcp.tool(name="about")
    def _about():
        """About information for the service."""
        return about(config)

    mcp.tool()(help)
    mcp.tool()(help_text)
