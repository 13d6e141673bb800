"""Data types shared across an approval pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SkipReason(str, Enum):
    """Why a pending run was not approved."""

    UNMAPPED_WORKFLOW = "unmapped-workflow"
    NO_FORK = "no-fork"
    NO_CHANGE_SET = "no-change-set"
    DANGEROUS_PATH = "dangerous-path"
    UNSAFE_PATH = "unsafe-path"


@dataclass(frozen=True)
class WorkflowDefinition:
    """An allow-listed workflow file and the ``name:`` it declares, if any."""

    path: str
    name: str | None = None


@dataclass(frozen=True)
class PendingRun:
    """Snapshot of a workflow run waiting for approval.

    ``head_owner`` is ``None`` when the fork the run came from was deleted.
    """

    id: int
    name: str
    head_branch: str | None = None
    head_owner: str | None = None
    head_sha: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, object]) -> PendingRun:
        head_repo = data.get("head_repository") or {}
        owner = (head_repo.get("owner") or {}).get("login")
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            head_branch=data.get("head_branch"),
            head_owner=owner,
            head_sha=data.get("head_sha"),
        )

    @property
    def head_label(self) -> str:
        return f"{self.head_owner}:{self.head_branch}"


@dataclass(frozen=True)
class ChangeSet:
    """A pull request and every path it touches.

    ``changed_files`` is the count GitHub reports for the pull request; the
    file listing stops at 3000 entries, so a shorter ``paths`` is incomplete.
    """

    number: int
    paths: tuple[str, ...] = ()
    changed_files: int | None = None

    @property
    def complete(self) -> bool:
        return self.changed_files is not None and len(self.paths) == self.changed_files


@dataclass(frozen=True)
class Decision:
    """Approve or skip outcome for one run."""

    run: PendingRun
    approved: bool
    reason: SkipReason | None = None
    pull_number: int | None = None
    detail: str = ""

    @classmethod
    def approve(cls, run: PendingRun, pull_number: int) -> Decision:
        return cls(run=run, approved=True, pull_number=pull_number)

    @classmethod
    def skip(cls, run: PendingRun, reason: SkipReason, pull_number: int | None = None, detail: str = "") -> Decision:
        return cls(run=run, approved=False, reason=reason, pull_number=pull_number, detail=detail)

    def to_dict(self) -> dict[str, object]:
        return {
            "run_id": self.run.id,
            "name": self.run.name,
            "approved": self.approved,
            "reason": self.reason.value if self.reason else None,
            "pull_number": self.pull_number,
            "detail": self.detail,
        }


@dataclass(frozen=True)
class ApprovalOutcome:
    """Result of posting one approval."""

    run_id: int
    approved: bool
    error: str | None = None


@dataclass
class PassReport:
    """Everything a single evaluate-and-act pass decided and did."""

    decisions: list[Decision] = field(default_factory=list)
    unmatched: list[Decision] = field(default_factory=list)
    outcomes: list[ApprovalOutcome] = field(default_factory=list)
    dry_run: bool = False

    @property
    def approved_ids(self) -> list[int]:
        return [o.run_id for o in self.outcomes if o.approved]

    @property
    def skipped(self) -> list[Decision]:
        return [d for d in self.decisions if not d.approved]

    @property
    def failed(self) -> list[ApprovalOutcome]:
        return [o for o in self.outcomes if not o.approved]

    def to_dict(self) -> dict[str, object]:
        return {
            "dry_run": self.dry_run,
            "decisions": [d.to_dict() for d in self.decisions],
            "unmatched_runs": [d.run.id for d in self.unmatched],
            "approved_runs": self.approved_ids,
            "failed_runs": [{"run_id": o.run_id, "error": o.error} for o in self.failed],
        }
