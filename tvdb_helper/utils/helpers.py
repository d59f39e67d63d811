"""Helper functions for tvdb-helper."""

from typing import Any, List, Optional

TIMEFRAMES = ("day", "week", "month", "all")


def update_timeframe(tf: Optional[str]) -> str:
    """Coerce an update timeframe; anything unknown means 'day'."""
    tf = (tf or "").strip().lower()
    return tf if tf in TIMEFRAMES else "day"


def as_list(value: Any) -> List[Any]:
    """Collapsed-empty ("") or missing -> [], a single record -> [record]."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]
