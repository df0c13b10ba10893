"""Process-time clocks for whole sessions and single runs, and seed derivation."""

from __future__ import annotations

import os
import time
from typing import Callable, Optional


def _user_time() -> float:
    return os.times().user


class RunClock:
    """Measures elapsed processor time for a session and for the current run."""

    def __init__(self, timer: Optional[Callable[[], float]] = None) -> None:
        self._timer = timer if timer is not None else _user_time
        self._total_start = 0.0
        self._run_start = 0.0
        self.total_time = 0.0
        self.run_time = 0.0

    def _elapsed(self, start: float) -> float:
        delta = self._timer() - start
        return delta if delta > 0.0 else 0.0

    def start_total(self) -> None:
        """Mark the start of the whole session."""
        self._total_start = self._timer()

    def stop_total(self) -> float:
        """Record and return the session's elapsed time."""
        self.total_time = self.total_elapsed()
        return self.total_time

    def start_run(self) -> None:
        """Mark the start of a run."""
        self._run_start = self._timer()

    def stop_run(self) -> float:
        """Record and return the run's elapsed time."""
        self.run_time = self.run_elapsed()
        return self.run_time

    def total_elapsed(self) -> float:
        """Seconds since the session started, never negative."""
        return self._elapsed(self._total_start)

    def run_elapsed(self) -> float:
        """Seconds since the run started, never negative."""
        return self._elapsed(self._run_start)


def initial_seed(seconds: Optional[int] = None, microseconds: Optional[int] = None) -> int:
    """Derive a random seed from wall-clock time (the current time by default)."""
    if seconds is None or microseconds is None:
        now = time.time()
        if seconds is None:
            seconds = int(now)
        if microseconds is None:
            microseconds = int((now - int(now)) * 1_000_000)
    return ((seconds & 0x7FF) * 1_000_000) + microseconds