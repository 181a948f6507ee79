"""Timing policy for automatic descent.

Whether a drop is due is a pure function of elapsed time and the current
drop interval, so it can be checked without any display loop. ``DropClock``
keeps the reference timestamp between ticks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def drop_due(elapsed_ms: float, interval_ms: float) -> bool:
    return elapsed_ms > interval_ms


@dataclass
class DropClock:
    last_drop_ms: Optional[float] = None

    def reset(self) -> None:
        """Forget the reference so the next tick starts a fresh interval."""
        self.last_drop_ms = None

    def due(self, now_ms: float, interval_ms: float) -> bool:
        if self.last_drop_ms is None:
            self.last_drop_ms = now_ms
        return drop_due(now_ms - self.last_drop_ms, interval_ms)

    def mark(self, now_ms: float) -> None:
        self.last_drop_ms = now_ms
