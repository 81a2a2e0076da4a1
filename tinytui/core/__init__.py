"""
Core utilities for tinytui.

Paths and logging shared by the UI layers and the demo CLI.
"""

from .paths import (
    get_data_dir,
    get_settings_path,
    get_log_dir,
    get_session_log_path,
)

from .logging import (
    TeeOutput,
    debug_log,
)

__all__ = [
    # Paths
    "get_data_dir",
    "get_settings_path",
    "get_log_dir",
    "get_session_log_path",
    # Logging
    "TeeOutput",
    "debug_log",
]
