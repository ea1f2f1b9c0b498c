"""
Control handlers for the Pomodoro TUI.

Provides ControlHandlersMixin with one action_* method per entry in
controls.CONTROLS, mixed into PomodoroApp. Textual calls these from key
bindings directly, and PomodoroApp routes button presses to them through
run_action(), so both paths run the same code on the UI thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .state import TimerSnapshot, TimerState


class ControlHandlersMixin:
    """Mixin providing the action_* handlers for the five controls."""

    # Type stubs for attributes provided by PomodoroApp
    state: TimerState

    # Method stubs for PomodoroApp / App methods, only present during type
    # checking so they don't shadow real methods inherited via MRO at runtime.
    if TYPE_CHECKING:
        log: Any

        def _show_snapshot(self, snapshot: TimerSnapshot) -> None: ...
        def stop_drivers(self) -> None: ...
        def exit(
            self, result: object = None, return_code: int = 0, message: str | None = None
        ) -> None: ...

    # -------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------
    # Each handler makes exactly one call into TimerState, which applies the
    # change under the state lock and hands back a snapshot taken inside the
    # same critical section. The display is redrawn from that snapshot.

    def action_increase_duration(self) -> None:
        """Handle +1 min: lengthen the work interval and restart the countdown."""
        snapshot = self.state.increase_duration()
        self.log.info(f"Work duration set to {snapshot.work_duration_seconds}s")
        self._show_snapshot(snapshot)

    def action_decrease_duration(self) -> None:
        """Handle -1 min: shorten the work interval (while above 1 min) and restart the countdown."""
        snapshot = self.state.decrease_duration()
        self.log.info(f"Work duration set to {snapshot.work_duration_seconds}s")
        self._show_snapshot(snapshot)

    def action_toggle_running(self) -> None:
        """Handle Start/Stop.

        The status region switches straight to "Working!"/"On Break!" or
        "Timer is paused" instead of waiting for the next render tick.
        """
        snapshot = self.state.toggle_running()
        self.log.info("Timer started" if snapshot.running else "Timer paused")
        self._show_snapshot(snapshot)

    def action_reset(self) -> None:
        """Handle Reset: stop, leave any break and reload the work interval."""
        snapshot = self.state.reset()
        self.log.info("Timer reset")
        self._show_snapshot(snapshot)

    async def action_quit(self) -> None:
        """Handle Quit: stop the background loops and exit with code 0."""
        self.stop_drivers()
        self.exit(return_code=0)
