"""Single-shot and watch-mode scan cycles."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .filters import ShowFilter, apply_filter
from .models import RepoStatus
from .scanner import scan

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 2.0

Scanner = Callable[[Path], list[RepoStatus]]
Presenter = Callable[[list[RepoStatus]], None]


@dataclass
class Ticker:
    """Call a function repeatedly with a pause between calls until cancelled.

    The pause waits on `stopped`, so `cancel()` from another thread or a signal
    handler ends the wait right away.
    """

    interval: float = DEFAULT_INTERVAL
    stopped: threading.Event = field(default_factory=threading.Event)

    def run(self, tick: Callable[[], None], *, max_ticks: int | None = None) -> int:
        """Run `tick` until cancelled or `max_ticks` calls have been made; return the call count."""

        count = 0
        while not self.stopped.is_set():
            tick()
            count += 1
            if max_ticks is not None and count >= max_ticks:
                break
            self.stopped.wait(self.interval)
        return count

    def cancel(self) -> None:
        self.stopped.set()


@dataclass
class CycleController:
    """Runs scan -> filter -> present, once or on a ticker."""

    root: Path
    show: ShowFilter
    present: Presenter
    scanner: Scanner = scan

    def run_once(self) -> list[RepoStatus]:
        statuses = apply_filter(self.scanner(self.root), self.show)
        logger.debug("Cycle over %s produced %d repositories", self.root, len(statuses))
        self.present(statuses)
        return statuses

    def run(self, *, watch: bool, ticker: Ticker | None = None) -> None:
        if not watch:
            self.run_once()
            return
        ticker = ticker or Ticker()
        ticker.run(self.run_once)


__all__ = ["DEFAULT_INTERVAL", "Ticker", "CycleController"]
