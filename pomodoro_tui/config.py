import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

# Load environment variables from .env file
load_dotenv()

# Timer Defaults (seconds)
DEFAULT_WORK_DURATION = 25 * 60
DEFAULT_BREAK_DURATION = 5 * 60

# Fixed, not configurable
DEFAULT_TICK_INTERVAL = 1.0
DURATION_STEP = 60
MIN_WORK_DURATION = 60

DEFAULT_CONFIG = {
    "WORK_DURATION": str(DEFAULT_WORK_DURATION),
    "BREAK_DURATION": str(DEFAULT_BREAK_DURATION),
}

# File Paths
POMODORO_DIR = Path(os.getenv("POMODORO_DIR", str(Path.home() / ".pomodoro_tui")))
CONFIG_FILE = Path(os.getenv("POMODORO_CONFIG_FILE", str(POMODORO_DIR / "config.json")))


def load_config() -> dict[str, Any]:
    """Load configuration from file"""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE) as f:
                config = json.load(f)
            if isinstance(config, dict):
                return config
            console.print(
                f"[yellow]Warning: Config file {CONFIG_FILE} is not a JSON object, ignoring it[/yellow]"
            )
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, config: dict[str, Any] | None = None) -> str:
    """Get setting with priority: Env Var > Config File > Default

    Pass an already loaded `config` to avoid reading the file once per key.
    """
    # 1. Environment Variable (including anything load_dotenv picked up)
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    if config is None:
        config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_int_setting(key: str, default: int, config: dict[str, Any] | None = None) -> int:
    """Get integer setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default), config)
    try:
        return int(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, using default {default}[/yellow]"
        )
        return default


def get_duration_setting(key: str, default: int, config: dict[str, Any] | None = None) -> int:
    """Get a positive whole number of seconds, falling back to the default otherwise"""
    value = get_int_setting(key, default, config)
    if value <= 0:
        console.print(
            f"[yellow]Warning: {key} must be positive, got {value}, using default {default}[/yellow]"
        )
        return default
    return value
