"""Policy utilities for Workflow Approver."""

from .paths import PathPolicy, matching_fragment
from .redaction import redact_secrets
from .workflows import filter_runs, resolve_workflow_names

__all__ = [
    "PathPolicy",
    "matching_fragment",
    "redact_secrets",
    "filter_runs",
    "resolve_workflow_names",
]
