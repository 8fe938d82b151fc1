"""Minimal utilities for invoking git commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .exceptions import BulkCommandError, StatusQueryError
from .models import BulkOperation

logger = logging.getLogger(__name__)

STATUS_ARGS = ("status", "--branch", "--porcelain")


def run_git(
    args: Sequence[str],
    *,
    cwd: Path,
    git: str = "git",
) -> subprocess.CompletedProcess[str]:
    """Run git in `cwd` and return the completed process without checking the exit code."""

    command = [git, *args]
    logger.debug("Running %s in %s", " ".join(command), cwd)
    return subprocess.run(
        command,
        cwd=str(cwd),
        text=True,
        encoding="utf-8",
        errors="replace",
        capture_output=True,
        check=False,
    )


def status_porcelain(path: Path, *, git: str = "git") -> str:
    """Return the raw branch-aware porcelain status of the working copy at `path`."""

    command = [git, *STATUS_ARGS]
    try:
        result = run_git(STATUS_ARGS, cwd=path, git=git)
    except OSError as exc:
        raise StatusQueryError(command, -1, stderr=str(exc)) from exc
    if result.returncode != 0:
        raise StatusQueryError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result.stdout


def run_operation(path: Path, operation: BulkOperation, *, git: str = "git") -> None:
    """Run `git fetch|pull|push` in `path`; raise BulkCommandError on failure."""

    command = [git, operation.value]
    try:
        result = run_git([operation.value], cwd=path, git=git)
    except OSError as exc:
        raise BulkCommandError(command, -1, stderr=str(exc)) from exc
    if result.returncode != 0:
        raise BulkCommandError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)


__all__ = ["STATUS_ARGS", "run_git", "status_porcelain", "run_operation"]
