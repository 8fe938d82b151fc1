"""Typer CLI entrypoint for git-radar."""

from __future__ import annotations

import functools
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .bulk import run_bulk, select_operation
from .config import RadarConfig, build_config, configure_logging
from .exceptions import RadarError
from .filters import ShowFilter
from .git import run_operation, status_porcelain
from .models import RepoStatus
from .render import (
    Theme,
    render_bulk_json,
    render_bulk_total,
    render_header,
    render_list,
    render_outcome,
    render_statuses_json,
    render_table,
)
from .scanner import scan
from .watch import CycleController, Ticker

logger = logging.getLogger(__name__)

EPILOG = """
Examples:

  git-radar                            # Scan current directory

  git-radar --table                    # Show results in a table

  git-radar --show unclean --watch     # Monitor only dirty repos

  git-radar --fetch                    # Fetch all repositories
"""

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-radar {__version__}")
        raise typer.Exit()


@app.command(help="Show the sync state of every git repository in DIRECTORY.", epilog=EPILOG)
def main(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory whose immediate subdirectories are scanned.",
        file_okay=False,
        dir_okay=True,
    ),
    show: ShowFilter = typer.Option(
        ShowFilter.ALL,
        "--show",
        case_sensitive=False,
        help="Filter repositories (all, clean, unclean).",
    ),
    watch: bool = typer.Option(False, "--watch", help="Continuously monitor status."),
    table: bool = typer.Option(False, "--table", help="Display results in a table."),
    fetch: bool = typer.Option(False, "--fetch", help="Fetch updates for all repositories."),
    pull: bool = typer.Option(False, "--pull", help="Pull updates for all repositories."),
    push: bool = typer.Option(False, "--push", help="Push updates for all repositories."),
    json_: bool = typer.Option(False, "--json", help="Output JSON instead of styled text."),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        help="Seconds between refreshes in watch mode (default 2, or $GIT_RADAR_INTERVAL).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-radar version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)
    if interval is not None and interval <= 0:
        raise typer.BadParameter("must be greater than zero", param_hint="--interval")

    console = Console()
    try:
        config = build_config(
            directory,
            show=show,
            watch=watch,
            table=table,
            as_json=json_,
            interval=interval,
            operation=select_operation(fetch, pull, push),
        )
        if config.operation is not None:
            _run_bulk(config, console)
        else:
            _run_scan(config, console)
    except RadarError as exc:
        _fail(f"Error: {exc}")


def _run_scan(config: RadarConfig, console: Console) -> None:
    theme = Theme()
    query = functools.partial(status_porcelain, git=config.git_executable)

    def present(statuses: list[RepoStatus]) -> None:
        if config.as_json:
            render_statuses_json(statuses, console)
            return
        if config.watch:
            console.clear()
        timestamp = datetime.now() if config.watch else None
        render_header(config.root, config.show, console, theme, timestamp=timestamp)
        if config.table:
            render_table(statuses, console, theme)
            return
        if not config.watch:
            console.print()
        render_list(statuses, console, theme)

    controller = CycleController(
        root=config.root,
        show=config.show,
        present=present,
        scanner=functools.partial(scan, query=query),
    )
    ticker = Ticker(interval=config.interval)
    try:
        controller.run(watch=config.watch, ticker=ticker)
    except KeyboardInterrupt:
        ticker.cancel()
        logger.debug("Watch interrupted")


def _run_bulk(config: RadarConfig, console: Console) -> None:
    theme = Theme()
    runner = functools.partial(run_operation, git=config.git_executable)
    on_outcome = None
    if not config.as_json:
        on_outcome = functools.partial(render_outcome, console=console, theme=theme)
    summary = run_bulk(config.root, config.operation, runner=runner, on_outcome=on_outcome)
    if config.as_json:
        render_bulk_json(summary, console)
    else:
        render_bulk_total(summary, console)


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


__all__ = ["app"]


if __name__ == "__main__":
    app()
