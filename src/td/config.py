"""Settings loaded from environment variables.

TD_DATA_DIR   directory holding the tasks file
TD_FILE       tasks file path (wins over TD_DATA_DIR)
TD_LOG_LEVEL  console log level name, WARNING by default
TD_LOG_FILE   optional file receiving DEBUG logs
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from .models import APP_DIR_NAME, TASKS_FILE_NAME

ENV_PREFIX = "TD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(env: Mapping[str, str], name: str, default: str = "") -> str:
    v = env.get(name)
    return default if v is None or v.strip() == "" else v


def _env_path(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return os.path.expanduser(raw)


def user_data_dir(
    env: Optional[Mapping[str, str]] = None, platform: Optional[str] = None
) -> str:
    """Per-user local application-data directory for td."""
    env = os.environ if env is None else env
    platform = sys.platform if platform is None else platform

    if platform.startswith("win"):
        base = env.get("LOCALAPPDATA") or os.path.expanduser("~\\AppData\\Local")
    elif platform == "darwin":
        base = os.path.expanduser("~/Library/Application Support")
    else:
        base = env.get("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")
    return os.path.join(base, APP_DIR_NAME)


@dataclass(frozen=True)
class Settings:
    data_dir: str
    tasks_file: str
    log_level: str
    log_file: Optional[str] = None

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        data_dir = _env_path(env, _k("DATA_DIR"), user_data_dir(env))
        tasks_file = _env_path(
            env, _k("FILE"), os.path.join(data_dir, TASKS_FILE_NAME)
        )
        log_level = _env(env, _k("LOG_LEVEL"), "WARNING").upper()
        log_file = _env(env, _k("LOG_FILE")) or None
        return Settings(
            data_dir=data_dir,
            tasks_file=tasks_file,
            log_level=log_level,
            log_file=log_file,
        )


def get_settings() -> Settings:
    return Settings.from_env()
