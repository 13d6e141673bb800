"""GitHub tool implementations.

Read-only views of the repository's pending runs.  Configuration is loaded
from the environment on every call.
"""

from __future__ import annotations

from ..config import Config
from ..constants import PENDING_STATUS
from ..github import api as github_api


def list_pending_runs(status: str = PENDING_STATUS) -> dict[str, object]:
    """List workflow runs in ``status`` for the configured repository."""
    config = Config.load_from_env()
    runs = github_api.list_pending_runs(config, status)
    return {
        "repository": config.repository,
        "status": status,
        "runs": [
            {
                "run_id": run.id,
                "name": run.name,
                "head_branch": run.head_branch,
                "head_owner": run.head_owner,
            }
            for run in runs
        ],
    }
