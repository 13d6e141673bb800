"""GitHub Action entrypoint for Workflow Approver.

Runs a single evaluate-and-act pass: loads the action inputs, approves the
eligible ``action_required`` runs and reports fatal errors as a failed step.
"""

from __future__ import annotations

import logging
import sys

from .config import Config
from .constants import DEFAULT_LOG_LEVEL
from .errors import ApproverError
from .models import PassReport
from .pipeline import run_approval_pass
from .policy.redaction import redact_secrets
from .telemetry import configure_logging, set_failed, set_output

logger = logging.getLogger(__name__)


def _write_outputs(report: PassReport) -> None:
    set_output("approved_runs", ",".join(str(run_id) for run_id in report.approved_ids))
    set_output("skipped_runs", ",".join(str(d.run.id) for d in report.skipped))


def main() -> int:
    """Entrypoint for the action.  Returns the process exit status."""
    configure_logging(DEFAULT_LOG_LEVEL, sys.stdout)

    try:
        config = Config.load_from_env()
    except ApproverError as exc:
        set_failed(str(exc))
        return 1

    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))
    if config.dry_run:
        logger.info("Dry run: no runs will be approved")

    try:
        report = run_approval_pass(config)
    except ApproverError as exc:
        set_failed(redact_secrets(str(exc), [config.github_token]))
        return 1

    _write_outputs(report)

    if report.failed:
        failed_ids = ", ".join(str(outcome.run_id) for outcome in report.failed)
        set_failed(f"Failed to approve runs: {failed_ids}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
