"""Collect a RepoStatus for every repository under a root directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .discovery import list_candidates
from .exceptions import EmptyStatusError, StatusQueryError
from .git import status_porcelain
from .models import RepoStatus
from .status import parse_status

logger = logging.getLogger(__name__)

StatusQuery = Callable[[Path], str]


def scan(root: Path, query: StatusQuery = status_porcelain) -> list[RepoStatus]:
    """Query and parse each candidate repository in discovery order.

    Repositories whose status cannot be read are left out of the result. Failure to
    list `root` itself propagates as DiscoveryError.
    """

    statuses: list[RepoStatus] = []
    for repo_path in list_candidates(root):
        try:
            output = query(repo_path)
            status = parse_status(output, name=repo_path.name)
        except (StatusQueryError, EmptyStatusError) as exc:
            logger.debug("Skipping %s: %s", repo_path, exc)
            continue
        statuses.append(status)
    return statuses


__all__ = ["StatusQuery", "scan"]
