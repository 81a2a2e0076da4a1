"""
Terminal utilities for tinytui.

Emits ANSI/VT100 control sequences (clearing, cursor movement, scroll
regions, colors) to any text sink and tracks the ambient terminal state
that interactive widgets need to put back when they finish.
"""

import os
import re
import shutil
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import NamedTuple, TextIO

from .colors import AnsiColor, AnsiStyle, LineClearMode, fg_code, bg_code

CSI = "\x1b["  # Control Sequence Introducer

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')

DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 24

# Held for a whole render-and-read transaction (menu session, size probe)
terminal_lock = threading.RLock()


class TerminalSize(NamedTuple):
    """Terminal dimensions, columns first."""
    columns: int
    rows: int


@dataclass
class TerminalState:
    """Process-wide display state that escape sequences change but cannot query."""
    cursor_visible: bool = True
    foreground: AnsiColor | None = None
    bright_foreground: bool = False


_state = TerminalState()


def get_state() -> TerminalState:
    return _state


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub('', text)


def truncate_text(text: str, max_len: int, suffix: str = "...") -> str:
    """Truncate text to max_len, adding suffix if truncated. Returns plain text (no ANSI)."""
    text = strip_ansi(text)
    if len(text) <= max_len:
        return text
    if max_len <= len(suffix):
        return text[:max_len]
    return text[:max_len - len(suffix)] + suffix


def _out(writer: TextIO | None) -> TextIO:
    return writer if writer is not None else sys.stdout


def write(data: str, writer: TextIO | None = None):
    """Write raw text or control sequences to the sink (stdout by default)."""
    _out(writer).write(data)


def flush(writer: TextIO | None = None):
    out = _out(writer)
    if hasattr(out, "flush"):
        out.flush()


def use_utf8():
    """Make sure stdout/stdin speak UTF-8 so box glyphs and replies pass through untouched.

    Call once near startup.
    """
    for stream in (sys.stdout, sys.stdin):
        encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
        if encoding != "utf8" and hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")


# ---------------------------------------------------------------------------
# Clear screen / line
# ---------------------------------------------------------------------------

def clear_screen(writer: TextIO | None = None, home: bool = True):
    """Clear the entire screen and optionally home the cursor."""
    write(CSI + "2J", writer)
    if home:
        write(CSI + "H", writer)


def clear_line(writer: TextIO | None = None, mode: LineClearMode = LineClearMode.FULL):
    """Clear the active line (default: whole line = ESC[2K)."""
    write(f"{CSI}{int(mode)}K", writer)


# ---------------------------------------------------------------------------
# Cursor movement
# ---------------------------------------------------------------------------

def goto(row: int, column: int, writer: TextIO | None = None):
    """Move the cursor to an absolute position (1-based row and column)."""
    write(f"{CSI}{row};{column}H", writer)


def _move(code: str, amount: int, writer: TextIO | None):
    if amount <= 0:
        return
    write(f"{CSI}{amount}{code}", writer)


def move_up(rows: int = 1, writer: TextIO | None = None):
    _move("A", rows, writer)


def move_down(rows: int = 1, writer: TextIO | None = None):
    _move("B", rows, writer)


def move_right(columns: int = 1, writer: TextIO | None = None):
    _move("C", columns, writer)


def move_left(columns: int = 1, writer: TextIO | None = None):
    _move("D", columns, writer)


def write_at(row: int, column: int, text: str, writer: TextIO | None = None):
    """Write text at the given row/column without altering other content."""
    goto(row, column, writer)
    write(text, writer)


def save_cursor(writer: TextIO | None = None):
    write(CSI + "s", writer)


def restore_cursor(writer: TextIO | None = None):
    write(CSI + "u", writer)


def hide_cursor(writer: TextIO | None = None):
    write(CSI + "?25l", writer)
    _state.cursor_visible = False


def show_cursor(writer: TextIO | None = None):
    write(CSI + "?25h", writer)
    _state.cursor_visible = True


# ---------------------------------------------------------------------------
# Scroll region
# ---------------------------------------------------------------------------

def set_scroll_region(top_row: int, bottom_row: int, writer: TextIO | None = None):
    """Confine line scrolling to rows top_row..bottom_row (1-based, inclusive)."""
    write(f"{CSI}{top_row};{bottom_row}r", writer)


def reset_scroll_region(writer: TextIO | None = None):
    write(CSI + "r", writer)


# ---------------------------------------------------------------------------
# Styles and colors
# ---------------------------------------------------------------------------

def set_style(*styles: AnsiStyle, writer: TextIO | None = None):
    """Apply zero or more SGR attributes; pass none to reset."""
    if not styles:
        reset_style(writer)
        return
    write(f"{CSI}{';'.join(str(int(s)) for s in styles)}m", writer)


def set_colors(
    writer: TextIO | None = None,
    foreground: AnsiColor | None = None,
    bright_foreground: bool = False,
    background: AnsiColor | None = None,
    bright_background: bool = False,
):
    """Apply a foreground and/or background color. Neither given resets all attributes."""
    parts = []
    if foreground is not None:
        parts.append(fg_code(foreground, bright_foreground))
    if background is not None:
        parts.append(bg_code(background, bright_background))

    if not parts:
        reset_style(writer)
        return

    write(f"{CSI}{';'.join(str(p) for p in parts)}m", writer)
    if foreground is not None:
        _state.foreground = foreground
        _state.bright_foreground = bright_foreground


def set_foreground(color: AnsiColor | None, bright: bool = False, writer: TextIO | None = None):
    """Set the text color; None selects the terminal's default foreground."""
    if color is None:
        write(CSI + "39m", writer)
        _state.foreground = None
        _state.bright_foreground = False
    else:
        set_colors(writer, foreground=color, bright_foreground=bright)


def reset_style(writer: TextIO | None = None):
    """Reset all SGR attributes (colors, bold, underline, etc.)."""
    write(CSI + "0m", writer)
    _state.foreground = None
    _state.bright_foreground = False


# ---------------------------------------------------------------------------
# Ambient state
# ---------------------------------------------------------------------------

@contextmanager
def ambient_state(writer: TextIO | None = None):
    """Snapshot foreground color and cursor visibility; put them back on exit.

    Restoration runs on every exit path, including exceptions raised inside
    the block, so nested widgets never leak visual state.
    """
    saved = TerminalState(
        cursor_visible=_state.cursor_visible,
        foreground=_state.foreground,
        bright_foreground=_state.bright_foreground,
    )
    try:
        yield saved
    finally:
        set_foreground(saved.foreground, saved.bright_foreground, writer)
        if saved.cursor_visible != _state.cursor_visible:
            if saved.cursor_visible:
                show_cursor(writer)
            else:
                hide_cursor(writer)
        flush(writer)


# ---------------------------------------------------------------------------
# Terminal size
# ---------------------------------------------------------------------------

def get_window_size() -> TerminalSize:
    """Return the logical window size reported by the OS (no escape round trip)."""
    try:
        size = os.get_terminal_size()
        return TerminalSize(size.columns, size.lines)
    except (OSError, ValueError):
        size = shutil.get_terminal_size((DEFAULT_COLUMNS, DEFAULT_ROWS))
        return TerminalSize(size.columns, size.lines)
