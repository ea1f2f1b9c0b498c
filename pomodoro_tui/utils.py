"""
Small helpers shared by the app that don't belong to the timer itself.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Get the installed package version from Python package metadata.

    Reads the version from the installed distribution's metadata, so it always
    matches what pip installed without parsing pyproject.toml at runtime.

    Returns "dev" when running from a source checkout that was never installed.
    """
    try:
        return version("pomodoro-tui")
    except PackageNotFoundError:
        return "dev"
