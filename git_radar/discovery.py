"""Find git working copies directly under a root directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .exceptions import DiscoveryError

logger = logging.getLogger(__name__)

GIT_MARKER = ".git"


def list_candidates(root: Path, marker: str = GIT_MARKER) -> list[Path]:
    """Return immediate subdirectories of `root` that contain `marker`.

    Order follows the filesystem listing and is not sorted. Non-directories and
    directories without the marker are skipped silently. A child whose marker cannot
    be checked for any reason other than absence is kept; the status query for it
    decides whether it shows up.
    """

    try:
        entries = list(root.iterdir())
    except OSError as exc:
        raise DiscoveryError(root, exc.strerror or str(exc)) from exc
    return [entry for entry in entries if _is_candidate(entry, marker)]


def _is_candidate(entry: Path, marker: str) -> bool:
    try:
        if not entry.is_dir():
            return False
    except OSError as exc:
        logger.debug("Skipping %s: %s", entry, exc)
        return False
    try:
        os.stat(entry / marker)
    except FileNotFoundError:
        return False
    except OSError as exc:
        logger.debug("Cannot check %s for %s, keeping it: %s", entry, marker, exc)
    return True


__all__ = ["GIT_MARKER", "list_candidates"]
