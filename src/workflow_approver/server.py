"""MCP stdio server entrypoint for Workflow Approver.

The server runs over standard input/output using the Model Context Protocol.
It registers tools that let a client inspect pending runs, preview the
approval decisions and run an approval pass.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .constants import DEFAULT_LOG_LEVEL
from .telemetry.logger import SERVER_FORMAT, configure_logging
from .tools import approval_tools, github_tools


def build_tools_dispatch() -> dict[str, Callable[..., dict[str, Any]]]:
    """Return a mapping from tool names to callables.

    Each callable accepts keyword arguments and returns a JSON-serializable
    dictionary.
    """
    return {
        "list_pending_runs": github_tools.list_pending_runs,
        "evaluate_pending_runs": approval_tools.evaluate_pending_runs,
        "approve_pending_runs": approval_tools.approve_pending_runs,
    }


def build_server() -> FastMCP:
    mcp = FastMCP("workflow-approver")
    for name, func in build_tools_dispatch().items():
        mcp.add_tool(func, name=name)
    return mcp


def main() -> None:
    """Entrypoint for the Workflow Approver MCP server."""
    # stdout carries the MCP protocol
    configure_logging(DEFAULT_LOG_LEVEL, sys.stderr, SERVER_FORMAT)
    logger = logging.getLogger(__name__)
    logger.info("Starting Workflow Approver MCP server")

    mcp = build_server()
    logger.info("Registered %d tools", len(build_tools_dispatch()))

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
