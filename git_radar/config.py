"""Runtime configuration assembled from CLI flags and the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigError
from .filters import ShowFilter
from .models import BulkOperation
from .watch import DEFAULT_INTERVAL

INTERVAL_ENV = "GIT_RADAR_INTERVAL"
GIT_ENV = "GIT_RADAR_GIT"


@dataclass(frozen=True)
class RadarConfig:
    """Everything one invocation needs, fixed at startup."""

    root: Path
    show: ShowFilter = ShowFilter.ALL
    watch: bool = False
    table: bool = False
    as_json: bool = False
    interval: float = DEFAULT_INTERVAL
    operation: BulkOperation | None = None
    git_executable: str = "git"


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def get_default_interval() -> float:
    """Watch interval from GIT_RADAR_INTERVAL, falling back to two seconds."""

    raw = os.environ.get(INTERVAL_ENV)
    if not raw:
        return DEFAULT_INTERVAL
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{INTERVAL_ENV} must be a number of seconds, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{INTERVAL_ENV} must be greater than zero, got {raw!r}")
    return value


def get_git_executable() -> str:
    return os.environ.get(GIT_ENV) or "git"


def resolve_root(directory: Path) -> Path:
    return directory.expanduser().resolve()


def build_config(
    directory: Path,
    *,
    show: ShowFilter = ShowFilter.ALL,
    watch: bool = False,
    table: bool = False,
    as_json: bool = False,
    interval: float | None = None,
    operation: BulkOperation | None = None,
) -> RadarConfig:
    """Combine CLI values with environment defaults; explicit values win."""

    return RadarConfig(
        root=resolve_root(directory),
        show=show,
        watch=watch,
        table=table,
        as_json=as_json,
        interval=interval if interval is not None else get_default_interval(),
        operation=operation,
        git_executable=get_git_executable(),
    )


__all__ = [
    "INTERVAL_ENV",
    "GIT_ENV",
    "RadarConfig",
    "configure_logging",
    "get_default_interval",
    "get_git_executable",
    "resolve_root",
    "build_config",
]
