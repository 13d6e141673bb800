"""Approval pass for runs waiting in ``action_required``.

A pass runs in two phases.  Every allow-listed run is first classified on
its own pull request; lookup failures abort the pass before anything is
approved.  The runs that survive are then approved concurrently, each
approval isolated from the others.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from .config import Config
from .constants import APPROVAL_WORKERS, PENDING_STATUS
from .errors import ApprovalError, GitHubAPIError, PullRequestLookupError
from .github import api as github_api
from .models import ApprovalOutcome, ChangeSet, Decision, PassReport, PendingRun, SkipReason
from .policy.paths import PathPolicy
from .policy.workflows import filter_runs, resolve_workflow_names

logger = logging.getLogger(__name__)


def _is_open(pr: dict[str, object]) -> bool:
    return pr.get("state") == "open"


def select_pull_request(pulls: Sequence[dict[str, object]], head_sha: str | None = None) -> dict[str, object] | None:
    """Pick one pull request when several share a head.

    A pull request whose head commit is the run's commit wins.  Otherwise
    open beats closed, then the highest number.  ``updated_at`` is not
    used.
    """
    if not pulls:
        return None
    if head_sha:
        matching = [pr for pr in pulls if (pr.get("head") or {}).get("sha") == head_sha]
        if matching:
            pulls = matching
    return max(pulls, key=lambda pr: (_is_open(pr), int(pr["number"])))


def locate_change_set(config: Config, run: PendingRun) -> ChangeSet | None:
    """Find the pull request behind ``run`` and list the files it touches.

    Returns ``None`` when the head fork is gone or no pull request matches.

    :raises PullRequestLookupError: if any GitHub lookup fails
    """
    if run.head_owner is None or not run.head_branch:
        return None
    try:
        pulls = github_api.find_pull_requests(config, run.head_owner, run.head_branch)
        pull = select_pull_request(pulls, run.head_sha)
        if pull is None:
            return None
        number = int(pull["number"])
        changed_files = github_api.get_pull_request(config, number).get("changed_files")
        paths = github_api.list_pull_request_files(config, number)
    except GitHubAPIError as exc:
        raise PullRequestLookupError.from_api_error(exc) from exc
    return ChangeSet(
        number=number,
        paths=tuple(paths),
        changed_files=int(changed_files) if changed_files is not None else None,
    )


def decide_run(config: Config, run: PendingRun, policy: PathPolicy) -> Decision:
    """Decide whether a single allow-listed run can be approved."""
    if run.head_owner is None:
        logger.info("Skipped run '%s': head repository no longer exists", run.id)
        return Decision.skip(run, SkipReason.NO_FORK)

    change_set = locate_change_set(config, run)
    if change_set is None:
        logger.info("No pull request found for '%s'", run.head_label)
        return Decision.skip(run, SkipReason.NO_CHANGE_SET)

    if not change_set.complete:
        logger.info(
            "Skipped run '%s': pull request #%s lists %d of %s changed files",
            run.id,
            change_set.number,
            len(change_set.paths),
            change_set.changed_files,
        )
        return Decision.skip(run, SkipReason.NO_CHANGE_SET, change_set.number, detail="incomplete file list")

    reason, offending = policy.classify(change_set.paths)
    if reason is not None:
        logger.info("Skipped dangerous run '%s'", run.id)
        logger.debug("Run '%s' (#%s) rejected as %s by '%s'", run.id, change_set.number, reason.value, offending)
        return Decision.skip(run, reason, change_set.number, detail=offending or "")

    return Decision.approve(run, change_set.number)


def decide_runs(config: Config, runs: Iterable[PendingRun], policy: PathPolicy) -> list[Decision]:
    return [decide_run(config, run, policy) for run in runs]


def _approve_one(config: Config, run: PendingRun) -> ApprovalOutcome:
    github_api.approve_run(config, run.id)
    logger.info("Approved run '%s'", run.id)
    return ApprovalOutcome(run_id=run.id, approved=True)


def execute_approvals(config: Config, runs: Sequence[PendingRun]) -> list[ApprovalOutcome]:
    """Approve every run concurrently; one failure never cancels the rest.

    Outcomes are returned in the order of ``runs``.  Any exception from one
    approval is recorded against that run only.
    """
    if not runs:
        return []
    if config.dry_run:
        for run in runs:
            logger.info("Would approve run '%s'", run.id)
        return []
    workers = max(1, min(APPROVAL_WORKERS, len(runs)))
    outcomes: list[ApprovalOutcome] = []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_approve_one, config, run) for run in runs]
        for run, future in zip(runs, futures):
            try:
                outcomes.append(future.result())
            except Exception as exc:
                error = ApprovalError(run.id, exc)
                logger.error("%s", error)
                outcomes.append(ApprovalOutcome(run_id=run.id, approved=False, error=str(error)))
    return outcomes


def run_approval_pass(config: Config) -> PassReport:
    """Run one evaluate-and-act pass against the configured repository.

    :raises ApproverError: on any resolution or lookup failure, before any
        run is approved
    """
    report = PassReport(dry_run=config.dry_run)
    name_to_path = resolve_workflow_names(config)

    runs = github_api.list_pending_runs(config, PENDING_STATUS)
    if not runs:
        logger.info("No runs found with status '%s'", PENDING_STATUS)
        return report

    kept, dropped = filter_runs(runs, name_to_path, config.workflows)
    report.unmatched = [Decision.skip(run, SkipReason.UNMAPPED_WORKFLOW) for run in dropped]
    for run in dropped:
        logger.debug("Ignoring run '%s' from workflow '%s'", run.id, run.name)
    if not kept:
        logger.info("No runs found for the following workflows: %s", ", ".join(config.workflows))
        return report

    policy = PathPolicy.from_config(config)
    report.decisions = decide_runs(config, kept, policy)
    approvable = [d.run for d in report.decisions if d.approved]
    report.outcomes = execute_approvals(config, approvable)
    return report
