"""GitHub API integration."""

from .api import (
    approve_run,
    find_pull_requests,
    get_pull_request,
    get_workflow_definition,
    list_pending_runs,
    list_pull_request_files,
)
from .auth import get_github_client

__all__ = [
    "get_github_client",
    "get_workflow_definition",
    "list_pending_runs",
    "find_pull_requests",
    "get_pull_request",
    "list_pull_request_files",
    "approve_run",
]
