"""Search context: expansion counting, progress and cancellation."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from backend.models.errors import SearchCancelled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressEvent:
    """Snapshot delivered to the progress callback."""

    expansions: int
    threshold: int


ProgressCallback = Callable[[ProgressEvent], None]


@dataclass
class SearchContext:
    """State shared between a running search and whoever started it.

    Attributes:
        progress_callback: Called with a ``ProgressEvent`` every
            ``progress_interval`` expansions.
        progress_interval: Expansions between two notifications.
        cancel_flag: Set it to stop the search at the next expansion.
        timeout_sec: Optional wall-clock limit, checked like the flag and
            measured from the last ``start`` call.
        expansions: Neighbors visited so far. Never decreases.
        threshold: Cost bound of the pass in progress.
    """

    progress_callback: ProgressCallback | None = None
    progress_interval: int = 1000
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: float | None = None
    start_time: float = field(default_factory=time.monotonic)
    expansions: int = 0
    threshold: int = 0
    _reported: int = field(default=0, repr=False)

    def start(self) -> None:
        """Restart the clock that ``timeout_sec`` and ``elapsed_time`` use."""
        self.start_time = time.monotonic()

    def cancel(self) -> None:
        self.cancel_flag.set()

    def is_cancelled(self) -> bool:
        return self.cancel_flag.is_set() or self.timed_out()

    def timed_out(self) -> bool:
        return self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec

    def elapsed_time(self) -> float:
        return time.monotonic() - self.start_time

    def record_expansion(self) -> None:
        """Count one visited neighbor; report and check cancellation.

        Raises ``SearchCancelled`` once cancellation has been requested.
        """
        self.expansions += 1
        if self.expansions % self.progress_interval == 0:
            logger.debug("trial count now: %d", self.expansions)
            self._report()
        if self.is_cancelled():
            raise SearchCancelled(f"cancelled after {self.expansions} expansions")

    def flush(self) -> None:
        """Report the final count if the last notification is stale."""
        if self.expansions != self._reported:
            self._report()

    def _report(self) -> None:
        self._reported = self.expansions
        if self.progress_callback:
            self.progress_callback(
                ProgressEvent(expansions=self.expansions, threshold=self.threshold)
            )
