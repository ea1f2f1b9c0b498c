"""
Entry point for running the timer as a module: `python -m pomodoro_tui`

The console script defined in pyproject.toml (`pomodoro-tui`) calls
`pomodoro_tui.main:main` directly; both paths end up in the same function.
"""

from .main import main

if __name__ == "__main__":
    main()
