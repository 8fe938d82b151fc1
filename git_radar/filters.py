"""Visibility filters applied to a scan result."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .models import RepoStatus


class ShowFilter(str, Enum):
    ALL = "all"
    CLEAN = "clean"
    UNCLEAN = "unclean"

    def matches(self, status: RepoStatus) -> bool:
        if self is ShowFilter.CLEAN:
            return status.is_clean
        if self is ShowFilter.UNCLEAN:
            return not status.is_clean
        return True


def apply_filter(statuses: Iterable[RepoStatus], show: ShowFilter) -> list[RepoStatus]:
    """Keep the records `show` accepts, preserving order."""

    return [status for status in statuses if show.matches(status)]


__all__ = ["ShowFilter", "apply_filter"]
