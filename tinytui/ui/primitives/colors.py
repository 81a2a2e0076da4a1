"""
Shared color and style definitions for terminal output.
"""

from enum import IntEnum


class AnsiColor(IntEnum):
    """The eight standard terminal colors (SGR offsets 0-7)."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class AnsiStyle(IntEnum):
    """Select Graphic Rendition attribute codes."""
    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    INVERSE = 7
    HIDDEN = 8
    STRIKE = 9


class LineClearMode(IntEnum):
    """Parameter for the erase-in-line sequence."""
    TO_END = 0
    TO_START = 1
    FULL = 2


def fg_code(color: AnsiColor, bright: bool = False) -> int:
    return (90 if bright else 30) + int(color)


def bg_code(color: AnsiColor, bright: bool = False) -> int:
    return (100 if bright else 40) + int(color)


def parse_color(name: str | None, default: AnsiColor | None = None) -> AnsiColor | None:
    """Resolve a color name like "cyan" to an AnsiColor. Unknown names give the default."""
    if not name:
        return default
    try:
        return AnsiColor[name.strip().upper()]
    except KeyError:
        return default
