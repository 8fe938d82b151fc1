"""Run fetch, pull or push across every discovered repository."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .discovery import list_candidates
from .exceptions import BulkCommandError
from .git import run_operation
from .models import BulkOperation, BulkOutcome, BulkSummary

logger = logging.getLogger(__name__)

OperationRunner = Callable[[Path, BulkOperation], None]
OutcomeCallback = Callable[[BulkOutcome], None]


def select_operation(fetch: bool, pull: bool, push: bool) -> BulkOperation | None:
    """Pick the single operation to run; fetch wins over pull, pull over push."""

    if fetch:
        return BulkOperation.FETCH
    if pull:
        return BulkOperation.PULL
    if push:
        return BulkOperation.PUSH
    return None


def run_bulk(
    root: Path,
    operation: BulkOperation,
    *,
    runner: OperationRunner = run_operation,
    on_outcome: OutcomeCallback | None = None,
) -> BulkSummary:
    """Run `operation` in each repository under `root`, one at a time.

    A failing repository is recorded and the batch carries on. `on_outcome` is called
    as soon as each repository finishes so progress can be shown while the rest run.
    """

    summary = BulkSummary(operation=operation)
    for repo_path in list_candidates(root):
        try:
            runner(repo_path, operation)
        except BulkCommandError as exc:
            logger.debug("%s failed in %s: %s", operation.value, repo_path, exc)
            outcome = BulkOutcome(
                name=repo_path.name,
                path=repo_path,
                operation=operation,
                ok=False,
                error=exc.stderr.strip() or str(exc),
            )
        else:
            outcome = BulkOutcome(name=repo_path.name, path=repo_path, operation=operation, ok=True)
        summary.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)
    return summary


__all__ = ["OperationRunner", "OutcomeCallback", "select_operation", "run_bulk"]
