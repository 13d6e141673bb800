"""Approval tool implementations.

``evaluate_pending_runs`` computes decisions without approving anything.
``approve_pending_runs`` runs a full pass and posts approvals for the runs
that pass every check.
"""

from __future__ import annotations

import dataclasses

from ..config import Config
from ..pipeline import run_approval_pass


def evaluate_pending_runs() -> dict[str, object]:
    """Return the decision for every pending run without approving any."""
    config = dataclasses.replace(Config.load_from_env(), dry_run=True)
    return run_approval_pass(config).to_dict()


def approve_pending_runs(dry_run: bool = False) -> dict[str, object]:
    """Run a full approval pass.  ``dry_run`` overrides the configured value when true."""
    config = Config.load_from_env()
    if dry_run:
        config = dataclasses.replace(config, dry_run=True)
    return run_approval_pass(config).to_dict()
