"""Rich output for scan results and bulk runs.

Every function takes the console and theme it should use, so nothing here keeps
style state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .filters import ShowFilter
from .models import BulkOutcome, BulkSummary, RepoStatus


@dataclass(frozen=True)
class Theme:
    """Styles for each part of the output."""

    title: str = "bold #7D56F4"
    repo: str = "#FAFAFA on #2B2D42"
    branch: str = "#888888"
    clean: str = "#04B575"
    dirty: str = "#FF5F87"
    ahead: str = "#00D7FF"
    behind: str = "#FFAF00"
    time: str = "#555555"
    border: str = "#333333"


def format_changes(status: RepoStatus, theme: Theme) -> Text:
    """`clean`, or `+added ~modified -deleted` with zero counts left out."""

    if not status.is_dirty:
        return Text("clean", style=theme.clean)
    details = []
    if status.added:
        details.append(f"+{status.added}")
    if status.modified:
        details.append(f"~{status.modified}")
    if status.deleted:
        details.append(f"-{status.deleted}")
    return Text(" ".join(details), style=theme.dirty)


def format_remote(status: RepoStatus, theme: Theme) -> Text:
    """Arrows for commits ahead/behind upstream; empty when in sync."""

    remote = Text()
    if status.ahead:
        remote.append(f"↑{status.ahead}", style=theme.ahead)
    if status.behind:
        if remote:
            remote.append(" ")
        remote.append(f"↓{status.behind}", style=theme.behind)
    return remote


def render_header(
    root: Path,
    show: ShowFilter,
    console: Console,
    theme: Theme,
    *,
    timestamp: datetime | None = None,
) -> None:
    header = Text.assemble((" Radar ", theme.title), " ", str(root))
    if timestamp is not None:
        header.append(" ")
        header.append(f"[{timestamp:%H:%M:%S}]", style=theme.time)
    console.print(header, soft_wrap=True)
    if show is not ShowFilter.ALL:
        console.print(f"Filtering: {show.value}", markup=False)


def render_status_line(status: RepoStatus, console: Console, theme: Theme) -> None:
    line = Text.assemble(
        (f" {status.name} ", theme.repo),
        " ",
        (f"({status.branch})", theme.branch),
        " ",
        format_changes(status, theme),
    )
    remote = format_remote(status, theme)
    if remote:
        line.append(" ")
        line.append_text(remote)
    console.print(line, soft_wrap=True)


def render_list(statuses: Sequence[RepoStatus], console: Console, theme: Theme) -> None:
    for status in statuses:
        render_status_line(status, console, theme)


def render_table(statuses: Sequence[RepoStatus], console: Console, theme: Theme) -> None:
    table = Table(
        box=box.SQUARE,
        border_style=theme.border,
        header_style="bold",
        show_lines=False,
    )
    table.add_column("REPOSITORY", style="bold", no_wrap=True)
    table.add_column("BRANCH", no_wrap=True)
    table.add_column("CHANGES", no_wrap=True)
    table.add_column("REMOTE", no_wrap=True)
    for status in statuses:
        table.add_row(
            Text(status.name),
            Text(status.branch),
            format_changes(status, theme),
            format_remote(status, theme),
        )
    console.print(table)


def render_statuses_json(statuses: Sequence[RepoStatus], console: Console) -> None:
    console.print_json(data=[status.to_dict() for status in statuses])


def render_outcome(outcome: BulkOutcome, console: Console, theme: Theme) -> None:
    label = Text("OK", style=theme.clean) if outcome.ok else Text("FAIL", style=theme.dirty)
    line = Text.assemble(label, f" [{outcome.operation.value}]: ", (f" {outcome.name} ", theme.repo))
    console.print(line, soft_wrap=True)


def render_bulk_total(summary: BulkSummary, console: Console) -> None:
    console.print()
    console.print(
        f"Total: {summary.success_count} successful, {summary.failure_count} failed",
        markup=False,
    )


def render_bulk_json(summary: BulkSummary, console: Console) -> None:
    console.print_json(
        data={
            "operation": summary.operation.value,
            "successful": summary.success_count,
            "failed": summary.failure_count,
            "repositories": [outcome.to_dict() for outcome in summary.outcomes],
        }
    )


__all__ = [
    "Theme",
    "format_changes",
    "format_remote",
    "render_header",
    "render_status_line",
    "render_list",
    "render_table",
    "render_statuses_json",
    "render_outcome",
    "render_bulk_total",
    "render_bulk_json",
]
