"""RoundTimer - Elapsed time bookkeeping for a round.

The clock is injectable so tests can drive time explicitly.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from pattern_recall.constants import TimerConfig


def format_elapsed(seconds: float) -> str:
    """Format seconds as zero-padded MM:SS (minutes are not capped at 59)."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


@dataclass
class RoundTimer:
    """Start/stop timer measured against a monotonic clock."""

    clock: Callable[[], float] = field(default=time.monotonic)
    started_at: float | None = None
    stopped_at: float | None = None

    @property
    def is_running(self) -> bool:
        return self.started_at is not None and self.stopped_at is None

    def start(self) -> None:
        self.started_at = self.clock()
        self.stopped_at = None

    def stop(self) -> None:
        if self.is_running:
            self.stopped_at = self.clock()

    def reset(self) -> None:
        self.started_at = None
        self.stopped_at = None

    @property
    def elapsed_seconds(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.stopped_at if self.stopped_at is not None else self.clock()
        return end - self.started_at

    @property
    def display(self) -> str:
        if self.started_at is None:
            return TimerConfig.EMPTY_DISPLAY
        return format_elapsed(self.elapsed_seconds)
