"""
Widgets for the Pomodoro TUI.

TimerDialog is the whole visible surface: a bordered box titled "Pomodoro
Timer" holding the two named text regions ("timer" and "status"), one button
per control and a dim line of keyboard hints.

TimerRefresh is the message the render thread posts to hand a fresh pair of
display lines to the UI thread; PhaseChanged is posted by the countdown thread
when a work or break interval runs out.
"""

from dataclasses import dataclass

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Static

from .controls import CONTROLS, get_key_hints
from .formatting import status_line, timer_line
from .state import TimerSnapshot

DIALOG_TITLE = "Pomodoro Timer"


@dataclass
class TimerRefresh(Message):
    """Posted from the render thread with the two lines to display."""

    timer_text: str
    status_text: str


@dataclass
class PhaseChanged(Message):
    """Posted from the countdown thread right after a work/break flip."""

    snapshot: TimerSnapshot


class TimerDialog(Vertical):
    """The timer dialog: two text regions above a row of control buttons."""

    DEFAULT_CSS = """
    TimerDialog {
        width: 64;
        height: auto;
        border: round $accent;
        padding: 1 2;
    }

    TimerDialog #timer {
        text-style: bold;
    }

    TimerDialog #buttons {
        width: auto;
        height: auto;
        margin-top: 1;
    }

    TimerDialog Button {
        min-width: 8;
        margin: 0 1 0 0;
    }

    TimerDialog #key-hints {
        text-style: dim;
        margin-top: 1;
    }
    """

    def __init__(self, snapshot: TimerSnapshot, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._initial = snapshot
        self.border_title = DIALOG_TITLE

    def compose(self) -> ComposeResult:
        yield Static(timer_line(self._initial.remaining_seconds), id="timer", markup=False)
        yield Static(
            status_line(self._initial.on_break, self._initial.running), id="status", markup=False
        )
        with Horizontal(id="buttons"):
            for control in CONTROLS:
                yield Button(control["label"], id=control["id"])
        yield Static(get_key_hints(), id="key-hints")
