"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class RepoStatus:
    """Sync state of one working copy, as reported by `git status --branch --porcelain`."""

    name: str
    branch: str = ""
    is_dirty: bool = False
    ahead: int = 0
    behind: int = 0
    added: int = 0
    modified: int = 0
    deleted: int = 0

    @property
    def is_clean(self) -> bool:
        return not self.is_dirty and self.ahead == 0 and self.behind == 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "branch": self.branch,
            "dirty": self.is_dirty,
            "ahead": self.ahead,
            "behind": self.behind,
            "added": self.added,
            "modified": self.modified,
            "deleted": self.deleted,
        }


class BulkOperation(str, Enum):
    """Network commands that can be run across every repository."""

    FETCH = "fetch"
    PULL = "pull"
    PUSH = "push"


@dataclass(frozen=True)
class BulkOutcome:
    """Result of running one bulk operation in one repository."""

    name: str
    path: Path
    operation: BulkOperation
    ok: bool
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": str(self.path),
            "operation": self.operation.value,
            "ok": self.ok,
            "error": self.error,
        }


@dataclass
class BulkSummary:
    """Tally of a bulk run, in processing order."""

    operation: BulkOperation
    outcomes: list[BulkOutcome] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failure_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)
