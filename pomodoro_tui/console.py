"""
Shared Rich Console for output that happens outside the Textual screen.

While the TUI is running, Textual owns the terminal and everything on screen
goes through widgets. Before the app starts (loading configuration) and after
it exits, plain terminal output goes through this one Console instead.

Keeping a single instance means tests can patch `pomodoro_tui.config.console`
in one place and capture every warning the configuration layer prints.

Usage:
    from .console import console
    console.print("[yellow]Warning: ...[/yellow]")
"""

from rich.console import Console

# Writes to stderr so warnings never mix with anything a caller pipes from stdout.
console = Console(stderr=True)
