"""tvdb-helper package.

Exports the TheTVDB client and the FastMCP app factory `create_app`.
"""
from .core import TvdbClient, TvdbConfig
from .server import create_app

__all__ = ["TvdbClient", "TvdbConfig", "create_app"]
