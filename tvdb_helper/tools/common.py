"""Shared result/error envelope for the MCP tools."""

import logging
from typing import Any, Callable, Dict

from ..core.errors import TvdbError
from ..core.http_client import SCHEMA, err_payload

log = logging.getLogger(__name__)

SOURCE = "thetvdb"


def run_tool(call: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
    """Run a tool body; client failures become an error payload."""
    try:
        out = call()
    except TvdbError as e:
        return err_payload(SOURCE, e.code, str(e))
    except ValueError as e:
        return err_payload(SOURCE, "BAD_REQUEST", str(e))
    except Exception as e:
        log.exception("unexpected tool failure")
        return err_payload(SOURCE, "UNEXPECTED", str(e))
    return {"schemaVersion": SCHEMA, "source": SOURCE, **out}
