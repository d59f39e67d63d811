"""Core functionality for tvdb-helper."""

from .client import TvdbClient
from .config import TvdbConfig
from .errors import TvdbError, RemoteError, UnexpectedShapeError, TransportError, DecodeError, ConfigError
from .http_client import http_get, fetch_bytes, download_to, err_payload
from .normalizers import (
    EntityKind, unwrap_envelope, detect_error, collapse_empty, split_pipe, split_pipe_each,
    prepare_output, normalize_single, normalize_archive,
)

__all__ = [
    "TvdbClient", "TvdbConfig",
    "TvdbError", "RemoteError", "UnexpectedShapeError", "TransportError", "DecodeError", "ConfigError",
    "http_get", "fetch_bytes", "download_to", "err_payload",
    "EntityKind", "unwrap_envelope", "detect_error", "collapse_empty", "split_pipe", "split_pipe_each",
    "prepare_output", "normalize_single", "normalize_archive",
]
