"""Error types raised by the TVDB client and its normalization pipeline."""

from typing import Optional


class TvdbError(Exception):
    """Base class for every failure the client reports."""

    code = "UNEXPECTED"


class RemoteError(TvdbError):
    """The catalog answered with an <Error> document."""

    code = "REMOTE"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnexpectedShapeError(TvdbError):
    """A response claims an envelope key but lacks the field nested under it."""

    code = "SHAPE"

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"expected field {field!r} is missing")
        self.field = field


class TransportError(TvdbError):
    code = "UPSTREAM"

    def __init__(self, message: str, status_code: Optional[int] = None, timeout: bool = False):
        super().__init__(message)
        self.status_code = status_code
        self.timeout = timeout
        if timeout:
            self.code = "TIMEOUT"
        elif status_code:
            self.code = f"UPSTREAM_{status_code}"


class DecodeError(TvdbError):
    """Malformed XML or a corrupt archive."""

    code = "DECODE"


class ConfigError(TvdbError):
    code = "CONFIG"
