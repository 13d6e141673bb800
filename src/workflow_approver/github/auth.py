"""Authentication helpers for GitHub API."""

from __future__ import annotations

import httpx

from .. import __version__
from ..config import Config
from ..constants import REQUEST_TIMEOUT_S


def get_github_client(config: Config) -> httpx.Client:
    """Return a configured GitHub httpx client with the Authorization header set."""
    return httpx.Client(
        headers={
            "Authorization": f"token {config.github_token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": f"workflow-approver/{__version__}",
        },
        timeout=REQUEST_TIMEOUT_S,
    )
