"""Workflow allow-list enforcement.

The runs API reports a run by the ``name:`` its workflow file declares, or
by the file path when no name is declared.  This module maps declared names
back to the allow-listed file paths and keeps only the runs whose workflow
is on the allow list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

import yaml

from ..config import Config
from ..errors import GitHubAPIError, ResolutionError
from ..github import api as github_api
from ..models import PendingRun, WorkflowDefinition

logger = logging.getLogger(__name__)


def parse_workflow_definition(path: str, content: str) -> WorkflowDefinition:
    """Parse workflow YAML and return its declared name, if any.

    :raises ResolutionError: if the content is not a YAML mapping
    """
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ResolutionError(f"Workflow definition '{path}' is not valid YAML: {exc}") from exc
    if not isinstance(document, dict):
        raise ResolutionError(f"Workflow definition '{path}' is not a YAML mapping")
    name = document.get("name")
    return WorkflowDefinition(path=path, name=str(name) if name else None)


def resolve_workflow_names(config: Config) -> dict[str, str]:
    """Fetch each allow-listed workflow and map its declared name to its path.

    Any fetch or parse failure aborts the pass: a definition that cannot be
    read would leave its runs unmatched or, worse, matched by accident.
    """
    name_to_path: dict[str, str] = {}
    for path in config.workflows:
        try:
            content = github_api.get_workflow_definition(config, path)
        except (GitHubAPIError, ValueError) as exc:
            raise ResolutionError(f"Unable to load workflow definition '{path}': {exc}") from exc
        if content is None:
            raise ResolutionError(f"Workflow definition not found: {path}")
        definition = parse_workflow_definition(path, content)
        if definition.name:
            name_to_path[definition.name] = definition.path
    logger.debug("Resolved workflow names: %s", name_to_path)
    return name_to_path


def canonical_workflow(run: PendingRun, name_to_path: Mapping[str, str]) -> str:
    """Return the workflow path a run belongs to, falling back to its name."""
    return name_to_path.get(run.name, run.name)


def filter_runs(
    runs: Iterable[PendingRun],
    name_to_path: Mapping[str, str],
    allowed: Sequence[str],
) -> tuple[list[PendingRun], list[PendingRun]]:
    """Split runs into those on the allow list and those that are not.

    Input order is preserved in both lists.
    """
    allowed_set = set(allowed)
    kept: list[PendingRun] = []
    dropped: list[PendingRun] = []
    for run in runs:
        if canonical_workflow(run, name_to_path) in allowed_set:
            kept.append(run)
        else:
            dropped.append(run)
    return kept, dropped
