"""Client configuration.

A config is bound once when a client is built and never changes afterwards;
use `with_language` to derive a copy for another language.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_MIRROR = "http://thetvdb.com"
DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT = 15


@dataclass(frozen=True)
class TvdbConfig:
    api_key: str = ""
    language: str = DEFAULT_LANGUAGE
    mirror: str = DEFAULT_MIRROR
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        # "http://thetvdb.com/" and "http://thetvdb.com" build the same URLs
        object.__setattr__(self, "mirror", self.mirror.rstrip("/"))

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TvdbConfig":
        """Build a config from TVDB_* environment variables."""
        env = os.environ if env is None else env
        raw_timeout = env.get("TVDB_TIMEOUT") or str(DEFAULT_TIMEOUT)
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"TVDB_TIMEOUT must be a number, got {raw_timeout!r}") from None
        return cls(
            api_key=env.get("TVDB_API_KEY", ""),
            language=env.get("TVDB_LANGUAGE") or DEFAULT_LANGUAGE,
            mirror=env.get("TVDB_MIRROR") or DEFAULT_MIRROR,
            timeout=timeout,
        )

    def with_language(self, language: Optional[str]) -> "TvdbConfig":
        if not language or language == self.language:
            return self
        return replace(self, language=language)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError("an API key is required for this endpoint (set TVDB_API_KEY)")
        return self.api_key
