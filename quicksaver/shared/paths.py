from __future__ import annotations

import ctypes
import os
import sys
from pathlib import Path

APP_NAME = "Quicksaver"
CONFIG_FILENAME = "quicksave.json"

# SHGetFolderPathW folder id for "My Documents"
CSIDL_PERSONAL = 5


def app_data_dir() -> Path:
    base = os.environ.get("APPDATA") or str(Path.home())
    return Path(base) / APP_NAME

def config_path() -> Path:
    override = os.environ.get("QUICKSAVER_CONFIG")
    if override:
        return Path(override)
    return app_data_dir() / CONFIG_FILENAME

def logs_dir() -> Path:
    return app_data_dir() / "logs"

def log_path() -> Path:
    return logs_dir() / "quicksaver.log"

def ensure_app_dirs() -> None:
    app_data_dir().mkdir(parents=True, exist_ok=True)
    logs_dir().mkdir(parents=True, exist_ok=True)


def documents_dir() -> Path:
    """Resolve the user's Documents folder (honours folder redirection on Windows)."""
    if sys.platform == "win32":
        buf = ctypes.create_unicode_buffer(260)
        if ctypes.windll.shell32.SHGetFolderPathW(None, CSIDL_PERSONAL, None, 0, buf) == 0:
            return Path(buf.value)
    return Path.home() / "Documents"

def default_save_directory() -> Path:
    return documents_dir() / "My Games" / "Starfield" / "Saves"
