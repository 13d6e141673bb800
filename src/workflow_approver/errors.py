"""Exception types raised during an approval pass.

Configuration, resolution and lookup failures are fatal and abort the pass.
``ApprovalError`` is scoped to a single run and never stops sibling
approvals.
"""

from __future__ import annotations


class ApproverError(RuntimeError):
    """Base class for all Workflow Approver failures."""


class ConfigurationError(ApproverError):
    """A required input is missing or malformed."""


class GitHubAPIError(ApproverError):
    """A GitHub API request failed at the transport or HTTP level."""

    def __init__(self, method: str, url: str, status_code: int | None = None, detail: str = "") -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.detail = detail
        if status_code is None:
            message = f"Error fetching {url} - {detail}"
        else:
            message = f"Error fetching {url} - HTTP {status_code}"
        super().__init__(message)


class ResolutionError(ApproverError):
    """An allow-listed workflow definition could not be fetched or parsed."""


class PullRequestLookupError(GitHubAPIError):
    """Finding a run's pull request or listing its files failed."""

    @classmethod
    def from_api_error(cls, exc: GitHubAPIError) -> PullRequestLookupError:
        return cls(exc.method, exc.url, exc.status_code, exc.detail)


class ApprovalError(ApproverError):
    """Approving a single run failed."""

    def __init__(self, run_id: int, cause: Exception) -> None:
        self.run_id = run_id
        self.cause = cause
        super().__init__(f"Failed to approve run '{run_id}': {cause}")
