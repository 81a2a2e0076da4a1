"""
User settings management for tinytui.

Manages ~/.tinytui/settings.json - widget preferences that persist across runs.
"""

import json
from pathlib import Path

from ..ui.primitives.colors import AnsiColor, parse_color


class TuiSettings:
    """
    Manages settings.json - user preferences that persist across runs.

    Stores:
    - Menu colors (prompt, highlight, selection) as color names
    - Size probe deadline in seconds (None waits forever)
    - Spinner frame interval in seconds
    """

    DEFAULT_PROMPT_COLOR = None
    DEFAULT_HIGHLIGHT_COLOR = "white"
    DEFAULT_SELECTION_COLOR = "cyan"
    DEFAULT_PROBE_TIMEOUT = 1.0
    DEFAULT_SPINNER_INTERVAL = 0.1

    def __init__(self, path: Path):
        self.path = path
        self.prompt_color: str | None = self.DEFAULT_PROMPT_COLOR
        self.highlight_color: str | None = self.DEFAULT_HIGHLIGHT_COLOR
        self.selection_color: str | None = self.DEFAULT_SELECTION_COLOR
        self.probe_timeout: float | None = self.DEFAULT_PROBE_TIMEOUT
        self.spinner_interval: float = self.DEFAULT_SPINNER_INTERVAL
        # Track if this is a fresh settings file (no file existed)
        self._is_new: bool = False

    @classmethod
    def load(cls, path: Path) -> "TuiSettings":
        """Load settings from file. Missing or unreadable files give defaults."""
        settings = cls(path)

        if not path.exists():
            settings._is_new = True
            return settings

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError):
            settings._is_new = True
            return settings

        if not isinstance(data, dict):
            settings._is_new = True
            return settings

        settings.prompt_color = data.get("prompt_color", cls.DEFAULT_PROMPT_COLOR)
        settings.highlight_color = data.get("highlight_color", cls.DEFAULT_HIGHLIGHT_COLOR)
        settings.selection_color = data.get("selection_color", cls.DEFAULT_SELECTION_COLOR)

        timeout = data.get("probe_timeout", cls.DEFAULT_PROBE_TIMEOUT)
        if timeout is None or (isinstance(timeout, (int, float)) and timeout > 0):
            settings.probe_timeout = timeout

        interval = data.get("spinner_interval", cls.DEFAULT_SPINNER_INTERVAL)
        if isinstance(interval, (int, float)) and interval > 0:
            settings.spinner_interval = float(interval)

        return settings

    def save(self):
        """Save settings to file."""
        data = {
            "prompt_color": self.prompt_color,
            "highlight_color": self.highlight_color,
            "selection_color": self.selection_color,
            "probe_timeout": self.probe_timeout,
            "spinner_interval": self.spinner_interval,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    @property
    def is_new(self) -> bool:
        return self._is_new

    def menu_colors(self) -> dict[str, AnsiColor | None]:
        """Resolved colors, keyed like show_menu's keyword arguments."""
        return {
            "prompt_color": parse_color(self.prompt_color),
            "highlight_color": parse_color(self.highlight_color, AnsiColor.WHITE),
            "selection_color": parse_color(self.selection_color, AnsiColor.CYAN),
        }
