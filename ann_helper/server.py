# SPDX-License-Identifier: MIT
"""
ANN-Helper server entrypoint.

Wires FastMCP with the tool modules under ann_helper/tools/, sharing one
EncyclopediaClient built from the environment.
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import AnnConfig, get_log_level
from .core.client import EncyclopediaClient
from .tools import search, details, meta


def create_app(config: Optional[AnnConfig] = None) -> FastMCP:
    config = config or AnnConfig.from_env()
    client = EncyclopediaClient(config)
    mcp = FastMCP("ann-helper")

    search.register_tools(mcp, client)
    details.register_tools(mcp, client)
    meta.register_tools(mcp, config)

    return mcp


def main() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    create_app().run()


if __name__ == "__main__":
    main()
