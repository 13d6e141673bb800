"""Logging setup for Workflow Approver."""

from __future__ import annotations

import logging
from typing import TextIO

ACTION_FORMAT = "%(message)s"
SERVER_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str, stream: TextIO, fmt: str = ACTION_FORMAT) -> None:
    """Configure the root logger once for the current process.

    The action writes plain lines so they read naturally in the workflow
    log; the MCP server adds timestamps and logs to stderr.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        stream=stream,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
