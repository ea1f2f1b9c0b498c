"""
Background tick loops for the Pomodoro TUI.

Two daemon threads run next to the Textual event loop, each waking once per
tick interval:

  - CountdownDriver advances the shared TimerState (decrement, or flip the
    phase at zero). It is the only background writer of the state.
  - RenderDriver takes a snapshot of the state and hands the two display
    lines to a sink. The sink is the only way text reaches the UI from this
    thread; the app implements it with Textual's thread-safe post_message so
    widgets are only ever touched on the UI thread.

The two loops are not synchronised with each other. A render may land just
before or just after a decrement, so the screen can lag by one tick.

Waiting is done with threading.Event.wait(), which behaves like time.sleep()
but returns early once stop() is called. Ticks are not corrected for drift.
"""

import threading
from collections.abc import Callable

from .config import DEFAULT_TICK_INTERVAL
from .formatting import status_line, timer_line
from .state import TimerSnapshot, TimerState

# Receives ("Time: MM:SS", "Status: ...") and returns False once the UI is gone.
RenderSink = Callable[[str, str], bool]


class TickLoop(threading.Thread):
    """Daemon thread that calls step() once per interval until stopped."""

    def __init__(self, interval: float = DEFAULT_TICK_INTERVAL, *, name: str) -> None:
        super().__init__(name=name, daemon=True)
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")
        self.interval = interval
        self._stop_event = threading.Event()

    def run(self) -> None:
        # wait() returns True only when stop() was called
        while not self._stop_event.wait(self.interval):
            if not self.step():
                break

    def step(self) -> bool:
        """Do one tick of work. Returning False ends the loop."""
        raise NotImplementedError

    def stop(self) -> None:
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()


class CountdownDriver(TickLoop):
    def __init__(
        self,
        state: TimerState,
        interval: float = DEFAULT_TICK_INTERVAL,
        on_phase_change: Callable[[TimerSnapshot], None] | None = None,
    ) -> None:
        super().__init__(interval, name="pomodoro-countdown")
        self.state = state
        self.on_phase_change = on_phase_change

    def step(self) -> bool:
        flipped, snapshot = self.state.advance()
        if flipped and self.on_phase_change:
            self.on_phase_change(snapshot)
        return True


class RenderDriver(TickLoop):
    def __init__(
        self,
        state: TimerState,
        sink: RenderSink,
        interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        super().__init__(interval, name="pomodoro-render")
        self.state = state
        self.sink = sink

    def step(self) -> bool:
        snapshot = self.state.snapshot()
        try:
            delivered = self.sink(
                timer_line(snapshot.remaining_seconds),
                status_line(snapshot.on_break, snapshot.running),
            )
        except RuntimeError:
            # The app has already shut down; nothing left to draw on.
            return False
        return delivered is not False
