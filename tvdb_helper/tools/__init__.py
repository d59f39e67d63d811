"""MCP tools for tvdb-helper."""

from . import series
from . import episodes
from . import artwork
from . import catalog
from . import meta

__all__ = [
    "series",
    "episodes",
    "artwork",
    "catalog",
    "meta",
]
