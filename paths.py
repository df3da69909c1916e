from __future__ import annotations
import os
import sys
from pathlib import Path


DATA_DIR_ENV = "TASKADEMIC_DATA_DIR"
APP_DIR_NAME = "taskademic"


def _platform_data_home() -> Path:
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or home / "AppData" / "Roaming")
    return Path(os.environ.get("XDG_DATA_HOME") or home / ".local" / "share")


def get_data_dir() -> Path:
    """
    Directory holding the profile index and snapshots.
    TASKADEMIC_DATA_DIR wins over the per-OS user data location.
    """
    override = os.environ.get(DATA_DIR_ENV)
    base = Path(override).expanduser() if override else _platform_data_home() / APP_DIR_NAME
    base.mkdir(parents=True, exist_ok=True)
    return base


def snapshot_dir() -> Path:
    path = get_data_dir() / "snapshots"
    path.mkdir(exist_ok=True)
    return path
