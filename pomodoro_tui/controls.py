"""
Control registry for the Pomodoro TUI.

This module is the single source of truth for the five user controls. The
dialog buttons, the App key bindings and the key-hint line under the dialog
are all generated from CONTROLS, so adding or relabelling a control only
touches this list.

The registry only holds metadata. The code that runs when a control fires
lives in handlers.py as `action_<action>` methods on the app.
"""

from typing import TypedDict

from textual.binding import Binding


class ControlInfo(TypedDict):
    """Type definition for one control.

    id:          Widget id of the button (also used to dispatch button presses)
    label:       Button text shown in the dialog
    keys:        Textual key names bound to the same action (comma separated)
    key_display: How the key is shown in the hint line
    action:      Action name; the app implements it as action_<action>
    description: Short explanation for the hint line and the Textual footer
    """

    id: str
    label: str
    keys: str
    key_display: str
    action: str
    description: str


CONTROLS: list[ControlInfo] = [
    {
        "id": "increase",
        "label": "+1 min",
        "keys": "plus",
        "key_display": "+",
        "action": "increase_duration",
        "description": "Lengthen work interval",
    },
    {
        "id": "decrease",
        "label": "-1 min",
        "keys": "minus",
        "key_display": "-",
        "action": "decrease_duration",
        "description": "Shorten work interval",
    },
    {
        "id": "toggle",
        "label": "Start/Stop",
        "keys": "s",
        "key_display": "s",
        "action": "toggle_running",
        "description": "Start or pause",
    },
    {
        "id": "reset",
        "label": "Reset",
        "keys": "r",
        "key_display": "r",
        "action": "reset",
        "description": "Back to a fresh work interval",
    },
    {
        "id": "quit",
        "label": "Quit",
        "keys": "q,ctrl+q",
        "key_display": "q",
        "action": "quit",
        "description": "Exit",
    },
]


def get_control(control_id: str) -> ControlInfo | None:
    """Look up a control by its button id."""
    for control in CONTROLS:
        if control["id"] == control_id:
            return control
    return None


def get_bindings() -> list[Binding]:
    """Build App key bindings for every control."""
    return [
        Binding(control["keys"], control["action"], control["description"])
        for control in CONTROLS
    ]


def get_key_hints() -> str:
    """One-line summary of the keyboard shortcuts, with Rich markup."""
    return "  ".join(
        f"[cyan]{control['key_display']}[/cyan] {control['label']}" for control in CONTROLS
    )
