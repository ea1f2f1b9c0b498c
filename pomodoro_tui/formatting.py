"""
Text shown in the timer dialog.

Both regions of the dialog are plain strings built here, so the render thread
and the control handlers always produce exactly the same text for the same
state.
"""


def format_time(seconds: int) -> str:
    """Format a number of seconds as zero-padded MM:SS.

    Minutes are not wrapped into hours, so 3600 renders as "60:00".
    """
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def format_status(on_break: bool, running: bool) -> str:
    """Describe the current phase, or that the timer is paused."""
    if not running:
        return "Timer is paused"
    if on_break:
        return "On Break!"
    return "Working!"


def timer_line(seconds: int) -> str:
    return f"Time: {format_time(seconds)}"


def status_line(on_break: bool, running: bool) -> str:
    return f"Status: {format_status(on_break, running)}"
