"""GitHub REST API wrapper.

Only the handful of endpoints an approval pass needs: workflow file
contents, pending runs, pull requests by head, pull request files and the
run approval endpoint.  Pagination is followed for pull request files only.
GitHub stops listing files at 3000, so callers compare the listing with the
pull request's ``changed_files`` count.
"""

from __future__ import annotations

import base64
import logging

import httpx

from ..config import Config
from ..constants import FILES_PER_PAGE, PENDING_STATUS
from ..errors import GitHubAPIError
from ..models import PendingRun
from .auth import get_github_client

logger = logging.getLogger(__name__)


def _github_request(
    config: Config,
    method: str,
    url: str,
    *,
    params: dict[str, object] | None = None,
    json: dict[str, object] | None = None,
    allow_404: bool = False,
) -> object | None:
    """Perform an HTTP request against the GitHub API.

    This helper wraps ``httpx`` to provide a default timeout, GitHub client
    headers and error handling.  Any non-2xx response (other than 404 when
    ``allow_404=True``) raises ``GitHubAPIError`` carrying the full request
    URL and status code.

    All requests go only to the configured API base URL.
    """
    if not url.startswith(f"{config.api_url}/"):
        raise ValueError(f"Invalid GitHub API URL: {url}")

    full_url = str(httpx.URL(url, params=params))
    try:
        with get_github_client(config) as client:
            resp = client.request(method, url, params=params, json=json)
    except httpx.HTTPError as exc:
        logger.error("GitHub API request failed: %s %s: %s", method, full_url, exc)
        raise GitHubAPIError(method, full_url, detail=str(exc)) from exc

    if allow_404 and resp.status_code == 404:
        return None

    if 200 <= resp.status_code < 300:
        try:
            return resp.json()
        except ValueError:
            return resp.text

    logger.debug("GitHub API error %s for %s %s: %s", resp.status_code, method, full_url, resp.text)
    raise GitHubAPIError(method, full_url, resp.status_code, resp.text)


def _repo_url(config: Config, suffix: str) -> str:
    return f"{config.api_url}/repos/{config.repository}/{suffix}"


def get_workflow_definition(config: Config, path: str) -> str | None:
    """Return the decoded text of a workflow file, or ``None`` if it does not exist."""
    data = _github_request(config, "GET", _repo_url(config, f"contents/{path}"), allow_404=True)
    if data is None:
        return None
    if not isinstance(data, dict) or "content" not in data:
        raise ValueError(f"'{path}' is not a file")
    return base64.b64decode(data["content"]).decode("utf-8")


def list_pending_runs(config: Config, status: str = PENDING_STATUS) -> list[PendingRun]:
    """List the repository's workflow runs in ``status`` (first page only)."""
    data = _github_request(config, "GET", _repo_url(config, "actions/runs"), params={"status": status})
    return [PendingRun.from_api(run) for run in data.get("workflow_runs", [])]


def find_pull_requests(config: Config, owner: str, branch: str) -> list[dict[str, object]]:
    """Find pull requests in any state whose head is ``owner:branch``."""
    params = {"state": "all", "head": f"{owner}:{branch}"}
    return list(_github_request(config, "GET", _repo_url(config, "pulls"), params=params) or [])


def get_pull_request(config: Config, pull_number: int) -> dict[str, object]:
    """Return a single pull request, including its ``changed_files`` count."""
    return _github_request(config, "GET", _repo_url(config, f"pulls/{pull_number}"))


def list_pull_request_files(config: Config, pull_number: int) -> list[str]:
    """Return the filenames GitHub lists for a pull request (at most 3000)."""
    filenames: list[str] = []
    page = 1
    while True:
        params = {"per_page": FILES_PER_PAGE, "page": page}
        items = _github_request(config, "GET", _repo_url(config, f"pulls/{pull_number}/files"), params=params)
        if not items:
            break
        filenames.extend(item["filename"] for item in items)
        if len(items) < FILES_PER_PAGE:
            break
        page += 1
    return filenames


def approve_run(config: Config, run_id: int) -> None:
    """Approve a workflow run from a fork pull request."""
    _github_request(config, "POST", _repo_url(config, f"actions/runs/{run_id}/approve"))
