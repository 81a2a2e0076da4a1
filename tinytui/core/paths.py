"""
Centralized path management for tinytui.

Directory structure:
    ~/.tinytui/             (or $TINYTUI_HOME)
        settings.json       - Widget colors, probe timeout, spinner speed
        logs/               - Session logs written by TeeOutput
"""

import os
from datetime import datetime
from pathlib import Path

# Directory name for app data (hidden on Unix)
DATA_DIR_NAME = ".tinytui"


def get_data_dir() -> Path:
    """
    Get the data directory.

    TINYTUI_HOME overrides the default of ~/.tinytui.
    """
    root = os.environ.get("TINYTUI_HOME")
    if root:
        return Path(root)
    return Path.home() / DATA_DIR_NAME


def get_settings_path() -> Path:
    return get_data_dir() / "settings.json"


def get_log_dir() -> Path:
    return get_data_dir() / "logs"


def get_session_log_path() -> Path:
    """Path for a new session log, named by start time."""
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return get_log_dir() / f"session-{stamp}.log"
