"""Global constants for Workflow Approver.

These values serve as defaults for configuration and for the GitHub API
calls issued during an approval pass.  Override environment variables
rather than editing them.
"""

import os

# GitHub
GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com").rstrip("/")
REQUEST_TIMEOUT_S = float(os.environ.get("REQUEST_TIMEOUT_S", 10.0))
FILES_PER_PAGE = 100

# Workflows
WORKFLOWS_DIR = ".github/workflows"
PENDING_STATUS = "action_required"

# Concurrency
APPROVAL_WORKERS = int(os.environ.get("APPROVAL_WORKERS", 8))

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
