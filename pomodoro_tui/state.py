"""
Shared timer state for the Pomodoro TUI.

Three actors touch the timer at once: the countdown thread, the render thread
and the control handlers running on the Textual event loop. All five fields
live behind a single lock so that a phase flip and the reload of the countdown
happen in one critical section; a reader can never see `remaining_seconds`
reloaded while `on_break` still holds the old phase.

Every public method takes the lock for a constant amount of work and returns a
TimerSnapshot copied inside the same critical section. Callers render from
the snapshot instead of reading fields one by one, which would let another
thread slip in between reads.
"""

import threading
from dataclasses import dataclass

from .config import (
    DEFAULT_BREAK_DURATION,
    DEFAULT_WORK_DURATION,
    DURATION_STEP,
    MIN_WORK_DURATION,
)


@dataclass(frozen=True)
class TimerSnapshot:
    """Consistent, immutable copy of the timer at one instant."""

    remaining_seconds: int
    on_break: bool
    running: bool
    work_duration_seconds: int
    break_duration_seconds: int


class TimerState:
    """The single shared timer record, guarded by one lock."""

    def __init__(
        self,
        work_duration_seconds: int = DEFAULT_WORK_DURATION,
        break_duration_seconds: int = DEFAULT_BREAK_DURATION,
    ) -> None:
        if work_duration_seconds <= 0:
            raise ValueError(f"work duration must be positive, got {work_duration_seconds}")
        if break_duration_seconds <= 0:
            raise ValueError(f"break duration must be positive, got {break_duration_seconds}")

        self._lock = threading.Lock()
        self._work_duration_seconds = int(work_duration_seconds)
        self._break_duration_seconds = int(break_duration_seconds)
        self._remaining_seconds = self._work_duration_seconds
        self._on_break = False
        self._running = False

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------

    def _snapshot_locked(self) -> TimerSnapshot:
        return TimerSnapshot(
            remaining_seconds=self._remaining_seconds,
            on_break=self._on_break,
            running=self._running,
            work_duration_seconds=self._work_duration_seconds,
            break_duration_seconds=self._break_duration_seconds,
        )

    def snapshot(self) -> TimerSnapshot:
        with self._lock:
            return self._snapshot_locked()

    @property
    def remaining_seconds(self) -> int:
        with self._lock:
            return self._remaining_seconds

    @property
    def on_break(self) -> bool:
        with self._lock:
            return self._on_break

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    @property
    def work_duration_seconds(self) -> int:
        with self._lock:
            return self._work_duration_seconds

    @property
    def break_duration_seconds(self) -> int:
        with self._lock:
            return self._break_duration_seconds

    # -------------------------------------------------------------------
    # Countdown
    # -------------------------------------------------------------------

    def tick(self) -> bool:
        """Advance the countdown by one tick.

        While paused this does nothing. While running it decrements the
        countdown, or, once it has reached zero, flips the phase and reloads
        the countdown with the duration of the phase just entered.

        Returns True when this tick flipped the phase.
        """
        with self._lock:
            return self._tick_locked()

    def advance(self) -> tuple[bool, TimerSnapshot]:
        """Tick once and return (flipped, snapshot) from the same critical section."""
        with self._lock:
            flipped = self._tick_locked()
            return flipped, self._snapshot_locked()

    def _tick_locked(self) -> bool:
        if not self._running:
            return False

        if self._remaining_seconds > 0:
            self._remaining_seconds -= 1
            return False

        self._on_break = not self._on_break
        if self._on_break:
            self._remaining_seconds = self._break_duration_seconds
        else:
            self._remaining_seconds = self._work_duration_seconds
        return True

    # -------------------------------------------------------------------
    # Controls
    # -------------------------------------------------------------------

    def increase_duration(self) -> TimerSnapshot:
        """Lengthen the work interval by one step and restart the countdown from it."""
        with self._lock:
            self._work_duration_seconds += DURATION_STEP
            self._remaining_seconds = self._work_duration_seconds
            return self._snapshot_locked()

    def decrease_duration(self) -> TimerSnapshot:
        """Shorten the work interval by one step while it is longer than one minute.

        The countdown is restarted from the work duration even when the guard
        leaves the duration itself unchanged.
        """
        with self._lock:
            if self._work_duration_seconds > MIN_WORK_DURATION:
                self._work_duration_seconds -= DURATION_STEP
            self._remaining_seconds = self._work_duration_seconds
            return self._snapshot_locked()

    def toggle_running(self) -> TimerSnapshot:
        with self._lock:
            self._running = not self._running
            return self._snapshot_locked()

    def reset(self) -> TimerSnapshot:
        """Stop the timer and go back to the start of a work interval."""
        with self._lock:
            self._running = False
            self._on_break = False
            self._remaining_seconds = self._work_duration_seconds
            return self._snapshot_locked()
