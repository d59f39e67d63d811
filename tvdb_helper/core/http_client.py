"""HTTP client and network functions for tvdb-helper."""

import logging
import time
import random
import requests
from pathlib import Path
from typing import Dict, Any, Union

from .errors import TransportError

log = logging.getLogger(__name__)

# Constants
DEFAULT_TIMEOUT = 15
RETRY_CODES = {429, 500, 502, 503, 504}
UA = "tvdb-helper/0.1"
SCHEMA = "1.0.0"
CHUNK_SIZE = 64 * 1024


def _req(method: str, url: str, **kw) -> requests.Response:
    """Internal request function with retry logic."""
    timeout = kw.pop("timeout", DEFAULT_TIMEOUT)
    headers = {"User-Agent": UA, **kw.pop("headers", {})}
    backoff = 0.7

    for attempt in range(3):
        try:
            r = requests.request(method, url, timeout=timeout, headers=headers, **kw)
            if r.status_code in RETRY_CODES:
                raise requests.HTTPError(f"{r.status_code} upstream", response=r)
            return r
        except requests.HTTPError as e:
            resp = getattr(e, "response", None)
            if resp is not None and resp.status_code in RETRY_CODES and attempt < 2:
                log.warning("retrying %s %s after HTTP %s", method, url, resp.status_code)
                time.sleep(backoff + random.random() * 0.4)
                backoff *= 2
                continue
            raise
        except requests.RequestException as e:
            if attempt < 2:
                log.warning("retrying %s %s after %s", method, url, e.__class__.__name__)
                time.sleep(backoff + random.random() * 0.4)
                backoff *= 2
                continue
            raise


def http_get(url: str, **kw) -> requests.Response:
    return _req("GET", url, **kw)


def _transport_error(url: str, e: requests.RequestException) -> TransportError:
    if isinstance(e, requests.Timeout):
        return TransportError(f"{url}: upstream timed out", timeout=True)
    resp = getattr(e, "response", None)
    status = resp.status_code if resp is not None else None
    return TransportError(f"{url}: {e}", status_code=status)


def fetch_bytes(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """GET a URL and return the body; anything but a 200 is a TransportError."""
    log.debug("GET %s", url)
    try:
        r = http_get(url, timeout=timeout)
    except requests.RequestException as e:
        raise _transport_error(url, e) from e
    if r.status_code != 200:
        raise TransportError(f"{url}: HTTP {r.status_code}", status_code=r.status_code)
    return r.content


def download_to(url: str, path: Union[str, Path], timeout: float = DEFAULT_TIMEOUT) -> Path:
    """Stream a URL into a file, creating parent directories as needed.

    The body goes to a `.part` sibling that replaces `path` only once the
    whole stream has arrived; a failed download leaves nothing behind.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".part")
    log.debug("GET %s -> %s", url, path)
    try:
        r = http_get(url, timeout=timeout, stream=True)
    except requests.RequestException as e:
        raise _transport_error(url, e) from e
    try:
        if r.status_code != 200:
            raise TransportError(f"{url}: HTTP {r.status_code}", status_code=r.status_code)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "wb") as fh:
            for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    fh.write(chunk)
        tmp.replace(path)
    except requests.RequestException as e:
        raise _transport_error(url, e) from e
    finally:
        r.close()
        tmp.unlink(missing_ok=True)
    return path


def err_payload(source: str, code: str, message: str) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}
