"""Parse `git status --branch --porcelain` output into a RepoStatus.

The first line carries the branch header::

    ## main...origin/main [ahead 2, behind 1]

Every following line of at least three characters is a change entry whose first two
characters are the index (``x``) and worktree (``y``) status codes. Each entry counts
towards at most one of modified, added or deleted, checked in that order, so ``MD``
is a modification. Entries with any other code still mark the repository dirty.
"""

from __future__ import annotations

import re

from .exceptions import EmptyStatusError
from .models import RepoStatus

BRANCH_PREFIX = "## "
UPSTREAM_SEPARATOR = "..."
TRACKING_SEPARATOR = ", "

_LEADING_INT = re.compile(r"\s*(\d+)")


def parse_status(output: str, name: str = "") -> RepoStatus:
    """Build a RepoStatus from raw porcelain output.

    Raises:
        EmptyStatusError: if the output holds nothing to parse.
    """

    if not output.strip():
        raise EmptyStatusError("git status returned no output")
    lines = output.split("\n")

    branch, ahead, behind = parse_branch_line(lines[0])

    is_dirty = False
    added = modified = deleted = 0
    for line in lines[1:]:
        if len(line) < 3:
            continue
        is_dirty = True
        x, y = line[0], line[1]
        if x == "M" or y == "M":
            modified += 1
        elif x == "A" or y == "?":
            added += 1
        elif x == "D" or y == "D":
            deleted += 1

    return RepoStatus(
        name=name,
        branch=branch,
        is_dirty=is_dirty,
        ahead=ahead,
        behind=behind,
        added=added,
        modified=modified,
        deleted=deleted,
    )


def parse_branch_line(line: str) -> tuple[str, int, int]:
    """Return (branch, ahead, behind) from the ``## `` header line.

    A line without the header prefix yields an empty branch and zero counts.
    """

    if not line.startswith(BRANCH_PREFIX):
        return "", 0, 0
    parts = line[len(BRANCH_PREFIX):].split(UPSTREAM_SEPARATOR, 1)
    branch = parts[0]
    ahead = behind = 0
    if len(parts) > 1:
        idx = parts[1].find("[")
        if idx != -1:
            info = parts[1][idx:].strip("[]")
            for token in info.split(TRACKING_SEPARATOR):
                if token.startswith("ahead "):
                    ahead = _parse_count(token[len("ahead "):])
                elif token.startswith("behind "):
                    behind = _parse_count(token[len("behind "):])
    return branch, ahead, behind


def _parse_count(text: str) -> int:
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return int(match.group(1))


__all__ = ["parse_status", "parse_branch_line"]
