"""Custom error hierarchy for git-radar."""

from __future__ import annotations

from pathlib import Path


class RadarError(RuntimeError):
    """Base error for the CLI."""


class ConfigError(RadarError):
    """Raised when a configuration value from the environment is invalid."""


class DiscoveryError(RadarError):
    """Raised when the root directory cannot be enumerated."""

    def __init__(self, root: Path, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot read directory {root}: {reason}")


class GitCommandError(RadarError):
    """Raised when an underlying git command fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        details = "\n".join(
            section
            for section in (self.stdout.strip(), self.stderr.strip())
            if section
        )
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class StatusQueryError(GitCommandError):
    """Raised when `git status` fails for one repository."""


class BulkCommandError(GitCommandError):
    """Raised when fetch/pull/push exits non-zero for one repository."""


class EmptyStatusError(RadarError):
    """Raised when `git status` succeeded but printed nothing to parse."""


__all__ = [
    "RadarError",
    "ConfigError",
    "DiscoveryError",
    "GitCommandError",
    "StatusQueryError",
    "BulkCommandError",
    "EmptyStatusError",
]
