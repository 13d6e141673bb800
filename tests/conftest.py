"""Pytest configuration and fixtures for Workflow Approver tests.

This module provides a FakeGitHub router that answers the GitHub REST calls
an approval pass makes, so tests run without network access.

IMPORTANT: Environment variables must be set BEFORE importing
workflow_approver modules, as constants are read at import time.
"""

from __future__ import annotations

import os

os.environ.setdefault("INPUT_TOKEN", "test-github-token")
os.environ.setdefault("INPUT_WORKFLOWS", "pr.yml,another.yml")
os.environ.setdefault("GITHUB_REPOSITORY", "demo/repo")
os.environ["GITHUB_API_URL"] = "https://api.github.com"

import base64
from collections.abc import Iterable
from typing import Any

import pytest
import yaml

API_URL = "https://api.github.com"
REPO_URL = f"{API_URL}/repos/demo/repo"


def make_response(mocker, status_code: int = 200, body: Any = None):
    """Build a mock ``httpx.Response`` with the given status and JSON body."""
    response = mocker.MagicMock()
    response.status_code = status_code
    if body is None:
        response.json.side_effect = ValueError("No JSON body")
        response.text = ""
    else:
        response.json.return_value = body
        response.text = str(body)
    return response


class FakeGitHub:
    """Routes ``httpx.Client.request`` calls to canned responses.

    Routes are keyed by method and the path below ``/repos/demo/repo/``.
    Pull request searches are keyed by their ``head`` parameter.  Anything
    not routed answers 404.

    This is ONLY for testing - not used in production.
    """

    def __init__(self, mocker) -> None:
        self._mocker = mocker
        self._routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.calls: list[tuple[str, str, dict[str, object] | None]] = []

    def add(self, method: str, path: str, status: int = 200, body: Any = None) -> None:
        self._routes[(method, path)] = (status, body)

    def workflow(self, name: str, content: dict[str, object] | None = None) -> None:
        document = {"on": "push", "jobs": {}, **(content or {})}
        encoded = base64.b64encode(yaml.safe_dump(document).encode("utf-8")).decode("ascii")
        self.add("GET", f"contents/.github/workflows/{name}", body={"content": encoded})

    def runs(self, runs: Iterable[dict[str, object]], status: int = 200) -> None:
        runs = list(runs)
        self.add("GET", "actions/runs", status, {"total_count": len(runs), "workflow_runs": runs})

    def pulls(self, head: str, *pulls: int | dict[str, object], status: int = 200) -> None:
        """Route a head search; ints are shorthand for ``{"number": n}``."""
        body = [pr if isinstance(pr, dict) else {"number": pr} for pr in pulls]
        self.add("GET", f"pulls?head={head}", status, body)

    def files(self, number: int, files: Iterable[str], status: int = 200, changed_files: int | None = None) -> None:
        """Route a pull request and its file listing.

        ``changed_files`` defaults to the number of listed files.
        """
        files = list(files)
        count = len(files) if changed_files is None else changed_files
        self.add("GET", f"pulls/{number}", body={"number": number, "changed_files": count})
        self.add("GET", f"pulls/{number}/files", status, [{"filename": f} for f in files])

    def approve(self, run_id: int | str, status: int = 201) -> None:
        self.add("POST", f"actions/runs/{run_id}/approve", status)

    @property
    def approved(self) -> list[str]:
        return [
            url.rsplit("/", 2)[-2]
            for method, url, _params in self.calls
            if method == "POST" and url.endswith("/approve")
        ]

    def request(self, method: str, url: str, params=None, json=None):
        self.calls.append((method, url, params))
        path = url.removeprefix(f"{REPO_URL}/")
        key = (method, path)
        if path == "pulls" and params:
            key = (method, f"pulls?head={params.get('head')}")
        if key not in self._routes:
            return make_response(self._mocker, 404, {"message": "Not Found"})
        status, body = self._routes[key]
        if path.endswith("/files") and params and params.get("page", 1) != 1:
            body = []
        return make_response(self._mocker, status, body)


def _github_run(
    run_id: str,
    name: str = ".github/workflows/pr.yml",
    owner: str | None = "user-a",
    branch: str = "patch-1",
    head_sha: str | None = None,
):
    return {
        "id": run_id,
        "name": name,
        "head_branch": branch,
        "head_sha": head_sha,
        "head_repository": {"owner": {"login": owner}} if owner is not None else None,
    }


@pytest.fixture
def github_run():
    """Return a factory for workflow run payloads shaped like the runs API."""
    return _github_run


@pytest.fixture
def fake_github(mocker):
    """Patch the GitHub client factory to answer from a FakeGitHub."""
    fake = FakeGitHub(mocker)
    mock_client = mocker.MagicMock()
    mock_client.request.side_effect = fake.request
    mock_client.__enter__ = mocker.MagicMock(return_value=mock_client)
    mock_client.__exit__ = mocker.MagicMock(return_value=False)
    mocker.patch("workflow_approver.github.api.get_github_client", return_value=mock_client)
    return fake


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Reset action inputs to the defaults used across the suite."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INPUT_TOKEN", "test-github-token")
    monkeypatch.setenv("INPUT_WORKFLOWS", "pr.yml,another.yml")
    monkeypatch.setenv("GITHUB_REPOSITORY", "demo/repo")
    monkeypatch.setenv("GITHUB_API_URL", API_URL)
    for name in ("INPUT_DANGEROUS_FILES", "INPUT_SAFE_FILES", "INPUT_DRY_RUN", "GITHUB_TOKEN", "GITHUB_OUTPUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
