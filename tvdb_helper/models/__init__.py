"""Models and type definitions for tvdb-helper."""

from .types import Actor, Banner, Episode, Series, Language, UpdateEntry, Updates

__all__ = ["Actor", "Banner", "Episode", "Series", "Language", "UpdateEntry", "Updates"]
