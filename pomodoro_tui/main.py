from textual import on
from textual.app import App, ComposeResult
from textual.css.query import NoMatches
from textual.widgets import Button, Footer, Header, Static

from .config import (
    DEFAULT_BREAK_DURATION,
    DEFAULT_TICK_INTERVAL,
    DEFAULT_WORK_DURATION,
    get_duration_setting,
    load_config,
)
from .controls import get_bindings, get_control
from .drivers import CountdownDriver, RenderDriver
from .formatting import status_line, timer_line
from .handlers import ControlHandlersMixin
from .state import TimerSnapshot, TimerState
from .utils import get_version
from .widgets import DIALOG_TITLE, PhaseChanged, TimerDialog, TimerRefresh


class PomodoroApp(ControlHandlersMixin, App):
    """Textual app hosting the timer dialog and its two background loops."""

    TITLE = DIALOG_TITLE

    CSS = """
    Screen {
        align: center middle;
    }
    """

    BINDINGS = get_bindings()

    def __init__(
        self,
        state: TimerState | None = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        super().__init__()
        self.state = state if state is not None else TimerState()
        self.tick_interval = tick_interval

        # Last text written to each named region, keyed by region id
        self.displayed: dict[str, str] = {}

        self.countdown_driver = CountdownDriver(
            self.state, tick_interval, on_phase_change=self._post_phase_change
        )
        self.render_driver = RenderDriver(self.state, self._post_refresh, tick_interval)

    def compose(self) -> ComposeResult:
        yield Header()
        yield TimerDialog(self.state.snapshot(), id="dialog")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = f"v{get_version()}"
        self.countdown_driver.start()
        self.render_driver.start()
        self.log.info(f"Tick loops started ({self.tick_interval}s interval)")

    def on_unmount(self) -> None:
        self.stop_drivers()

    def stop_drivers(self) -> None:
        self.countdown_driver.stop()
        self.render_driver.stop()

    # -------------------------------------------------------------------
    # Background thread -> UI thread handoff
    # -------------------------------------------------------------------
    # These two run on the driver threads. post_message is thread-safe and
    # returns False once the app is closing, which ends the render loop. Once
    # the event loop itself is gone it raises RuntimeError instead.

    def _post_refresh(self, timer_text: str, status_text: str) -> bool:
        return self.post_message(TimerRefresh(timer_text, status_text))

    def _post_phase_change(self, snapshot: TimerSnapshot) -> None:
        try:
            self.post_message(PhaseChanged(snapshot))
        except RuntimeError:
            # Flipped during shutdown; there is no UI left to log to.
            pass

    @on(TimerRefresh)
    def _apply_refresh(self, message: TimerRefresh) -> None:
        try:
            self._set_region("timer", message.timer_text)
            self._set_region("status", message.status_text)
        except NoMatches:
            # Arrived after the dialog was torn down on exit
            return

    @on(PhaseChanged)
    def _log_phase_change(self, message: PhaseChanged) -> None:
        phase = "break" if message.snapshot.on_break else "work"
        self.log.info(f"Phase changed to {phase} ({message.snapshot.remaining_seconds}s)")

    # -------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------

    def _set_region(self, region: str, text: str) -> None:
        self.query_one(f"#{region}", Static).update(text)
        self.displayed[region] = text

    def _show_snapshot(self, snapshot: TimerSnapshot) -> None:
        self._set_region("timer", timer_line(snapshot.remaining_seconds))
        self._set_region("status", status_line(snapshot.on_break, snapshot.running))

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route a dialog button to the action of the same control."""
        control = get_control(event.button.id or "")
        if control is None:
            return
        event.stop()
        await self.run_action(control["action"])


def main():
    # Interval lengths (configurable via .env or ~/.pomodoro_tui/config.json).
    # The tick cadence is always one second.
    config = load_config()
    work_duration = get_duration_setting("WORK_DURATION", DEFAULT_WORK_DURATION, config)
    break_duration = get_duration_setting("BREAK_DURATION", DEFAULT_BREAK_DURATION, config)

    app = PomodoroApp(TimerState(work_duration, break_duration))
    app.run()
    app.stop_drivers()


if __name__ == "__main__":
    main()
