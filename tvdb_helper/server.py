# SPDX-License-Identifier: MIT
"""
tvdb-helper server entrypoint.

Wires FastMCP with the tool modules under tvdb_helper/tools/, all sharing
one TvdbClient.
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .core.client import TvdbClient
from .tools import series, episodes, artwork, catalog, meta


def create_app(client: Optional[TvdbClient] = None) -> FastMCP:
    client = client or TvdbClient()
    mcp = FastMCP("tvdb-helper")

    # Register tools from each module
    series.register_tools(mcp, client)
    episodes.register_tools(mcp, client)
    artwork.register_tools(mcp, client)
    catalog.register_tools(mcp, client)
    meta.register_tools(mcp, client.config)

    return mcp


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    app.run()


if __name__ == "__main__":
    main()
