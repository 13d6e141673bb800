"""Tool module exports for Workflow Approver.

Each submodule exposes functions that the MCP server registers as tools.

Usage:

    from workflow_approver.tools import approval_tools
    approval_tools.evaluate_pending_runs()
"""

from . import (
    approval_tools,  # noqa: F401
    github_tools,  # noqa: F401
)

__all__ = [
    "approval_tools",
    "github_tools",
]
