"""Configuration loading for Workflow Approver.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a frozen `Config` object.  GitHub Actions
exposes action inputs as ``INPUT_<NAME>`` environment variables, so the
same loader serves the action, the MCP server and local runs.

Required variables:
- INPUT_TOKEN (or GITHUB_TOKEN)
- INPUT_WORKFLOWS
- GITHUB_REPOSITORY

Optional variables with defaults:
- INPUT_DANGEROUS_FILES (default: empty, `.github/workflows` is always added)
- INPUT_SAFE_FILES (default: empty, which disables the safe-path check)
- INPUT_DRY_RUN (default: 'false')
- GITHUB_API_URL (default: 'https://api.github.com')
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_LOG_LEVEL, GITHUB_API_URL, WORKFLOWS_DIR
from .errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


def _get_input(name: str) -> str:
    return os.getenv(f"INPUT_{name.upper()}", "").strip()


def split_list(value: str) -> tuple[str, ...]:
    """Split a comma separated input, dropping blank entries."""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Config:
    """Configuration values loaded once at the start of a pass."""

    github_token: str
    repository: str
    workflows: tuple[str, ...]
    dangerous_files: tuple[str, ...]
    safe_files: tuple[str, ...] = ()
    dry_run: bool = False
    api_url: str = GITHUB_API_URL
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        # The workflows directory can never be dropped from the denylist.
        if WORKFLOWS_DIR not in self.dangerous_files:
            object.__setattr__(self, "dangerous_files", (*self.dangerous_files, WORKFLOWS_DIR))

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  Raises `ConfigurationError`
        naming the first required input that is missing.
        """
        load_dotenv()

        github_token = _get_input("token") or os.getenv("GITHUB_TOKEN", "").strip()
        if not github_token:
            raise ConfigurationError("Input required and not supplied: token")

        workflows = split_list(_get_input("workflows"))
        if not workflows:
            raise ConfigurationError("Input required and not supplied: workflows")

        repository = os.getenv("GITHUB_REPOSITORY", "").strip()
        if not repository:
            raise ConfigurationError("Missing required environment variable: GITHUB_REPOSITORY")
        if repository.count("/") != 1 or not all(repository.split("/")):
            raise ConfigurationError(f"Invalid GITHUB_REPOSITORY '{repository}', expected 'owner/repo'")

        return cls(
            github_token=github_token,
            repository=repository,
            workflows=tuple(f"{WORKFLOWS_DIR}/{name}" for name in workflows),
            dangerous_files=split_list(_get_input("dangerous_files")),
            safe_files=split_list(_get_input("safe_files")),
            dry_run=_get_input("dry_run").lower() in _TRUTHY,
            api_url=os.getenv("GITHUB_API_URL", GITHUB_API_URL).rstrip("/"),
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
