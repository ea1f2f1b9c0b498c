"""Pomodoro TUI - terminal Pomodoro countdown timer"""

from .config import (
    CONFIG_FILE,
    DEFAULT_BREAK_DURATION,
    DEFAULT_CONFIG,
    DEFAULT_TICK_INTERVAL,
    DEFAULT_WORK_DURATION,
    DURATION_STEP,
    MIN_WORK_DURATION,
    POMODORO_DIR,
    get_duration_setting,
    get_int_setting,
    get_setting,
    load_config,
)
from .console import console
from .controls import CONTROLS, get_bindings, get_control, get_key_hints
from .drivers import CountdownDriver, RenderDriver, TickLoop
from .formatting import format_status, format_time, status_line, timer_line
from .state import TimerSnapshot, TimerState
from .utils import get_version

__all__ = [
    # Config
    "CONFIG_FILE",
    "DEFAULT_BREAK_DURATION",
    "DEFAULT_CONFIG",
    "DEFAULT_TICK_INTERVAL",
    "DEFAULT_WORK_DURATION",
    "DURATION_STEP",
    "MIN_WORK_DURATION",
    "POMODORO_DIR",
    "get_duration_setting",
    "get_int_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    # Controls
    "CONTROLS",
    "get_bindings",
    "get_control",
    "get_key_hints",
    # Drivers
    "CountdownDriver",
    "RenderDriver",
    "TickLoop",
    # Formatting
    "format_status",
    "format_time",
    "status_line",
    "timer_line",
    # State
    "TimerSnapshot",
    "TimerState",
    # Utils
    "get_version",
]
