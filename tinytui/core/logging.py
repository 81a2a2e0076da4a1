"""
Logging utilities for tinytui.
"""

import re
import sys
from datetime import datetime
from pathlib import Path

# Any CSI sequence, not just SGR: widgets emit cursor moves and clears too
_ESCAPE_RE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')


class TeeOutput:
    """Write to both stdout and a log file, filtering out UI noise."""

    # Patterns to skip in log file (boxes, menus, spinner frames)
    _SKIP_PATTERNS = [
        r'[┌┐└┘│─┬┴]',           # Box drawing characters
        r'[⣾⣽⣻⢿⡿⣟⣯⣷⣿]',      # Spinner frames
        r'^> ',                    # Current menu item
        r'^  \[[x ]\] ',           # Multi-select menu rows
        r'Enter=Confirm',          # Menu instructions line
        r'^\s*$',                  # Blank lines
    ]

    def __init__(self, log_path: Path, version: str = None):
        self.terminal = sys.stdout
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_file = open(log_path, "a", encoding="utf-8")
        self._skip_regex = re.compile('|'.join(self._SKIP_PATTERNS))
        self._line_buffer = ""
        self.log_file.write(f"\n{'='*60}\n")
        version_str = f" v{version}" if version else ""
        self.log_file.write(f"Session started: {datetime.now().isoformat()}{version_str}\n")
        self.log_file.write(f"{'='*60}\n\n")
        self.log_file.flush()

    @property
    def encoding(self):
        return getattr(self.terminal, "encoding", "utf-8")

    def fileno(self):
        return self.terminal.fileno()

    def isatty(self):
        return self.terminal.isatty()

    def write(self, message):
        self.terminal.write(message)

        clean = _ESCAPE_RE.sub('', message)
        self._line_buffer += clean

        while '\n' in self._line_buffer:
            line, self._line_buffer = self._line_buffer.split('\n', 1)
            # Keep only what follows the last carriage return
            line = line.rsplit('\r', 1)[-1]
            if not self._skip_regex.search(line):
                stripped = line.rstrip()
                if stripped:
                    self.log_file.write(f"{self._timestamp()} {stripped}\n")

        if '\r' in self._line_buffer:
            self._line_buffer = self._line_buffer.rsplit('\r', 1)[-1]

        self.log_file.flush()

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def close(self):
        if self._line_buffer.strip() and not self._skip_regex.search(self._line_buffer):
            self.log_file.write(f"{self._timestamp()} {self._line_buffer.rstrip()}\n")
        self._line_buffer = ""
        self.log_file.close()

    def log_only(self, message: str):
        """Write a message only to the log file, not to terminal."""
        self.log_file.write(f"{self._timestamp()} {message}\n")
        self.log_file.flush()

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("[%H:%M:%S]")


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if hasattr(sys.stdout, 'log_only'):
        sys.stdout.log_only(message)
    # If not using TeeOutput (e.g., tests), silently ignore
