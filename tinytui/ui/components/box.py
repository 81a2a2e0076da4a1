"""
Box drawing component.

Bordered text boxes positioned with absolute cursor moves, plus a
single-row inline box for short status strips.
"""

from typing import Iterable, TextIO

from ..primitives.colors import AnsiColor
from ..primitives.terminal import goto, reset_style, set_colors, write

BOX_TL = "┌"
BOX_TR = "┐"
BOX_BL = "└"
BOX_BR = "┘"
BOX_H = "─"
BOX_V = "│"
BOX_T_DOWN = "┬"
BOX_T_UP = "┴"


def _write_colored(output: TextIO | None, text: str, color: AnsiColor | None, bright: bool):
    if not text:
        return
    if color is None:
        write(text, output)
        return
    set_colors(output, foreground=color, bright_foreground=bright)
    write(text, output)
    reset_style(output)


def prepare_content_lines(content: Iterable[str] | None, inner_width: int, inner_height: int) -> list[str]:
    """
    Split content into display lines that fit inside the box.

    Embedded newlines start new lines, long lines are hard-wrapped at
    inner_width, and the result is cut off at inner_height lines.
    """
    lines: list[str] = []
    if content is None or inner_height <= 0:
        return lines

    for entry in content:
        normalized = (entry or "").replace("\r\n", "\n").replace("\r", "\n")
        for segment in normalized.split("\n"):
            if inner_width <= 0 or not segment:
                lines.append("")
            else:
                for start in range(0, len(segment), inner_width):
                    lines.append(segment[start:start + inner_width])
                    if len(lines) >= inner_height:
                        return lines
            if len(lines) >= inner_height:
                return lines

    return lines


def _decorate_title(title: str | None, inner_width: int) -> str | None:
    if not title or not title.strip() or inner_width <= 0:
        return None
    decorated = f" {title.strip()} ".replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return decorated[:inner_width]


def show_box(
    x: int,
    y: int,
    width: int,
    height: int,
    title: str | None = None,
    content: Iterable[str] | None = None,
    writer: TextIO | None = None,
    border_color: AnsiColor | None = None,
    bright_border: bool = False,
    text_color: AnsiColor | None = None,
    bright_text: bool = False,
):
    """
    Draw a rectangular box at 1-based column x, row y.

    Raises:
        ValueError: If x or y is below 1, or width or height is below 2.
    """
    if x < 1:
        raise ValueError(f"x must be >= 1, got {x}")
    if y < 1:
        raise ValueError(f"y must be >= 1, got {y}")
    if width < 2:
        raise ValueError(f"width must be >= 2, got {width}")
    if height < 2:
        raise ValueError(f"height must be >= 2, got {height}")

    inner_width = width - 2
    inner_height = height - 2
    lines = prepare_content_lines(content, inner_width, inner_height)

    # Top border with the title centred in it
    goto(y, x, writer)
    decorated = _decorate_title(title, inner_width)
    if decorated is None:
        left, right = inner_width, 0
    else:
        left = max(0, (inner_width - len(decorated)) // 2)
        right = max(0, inner_width - len(decorated) - left)
    _write_colored(writer, BOX_TL, border_color, bright_border)
    _write_colored(writer, BOX_H * left, border_color, bright_border)
    if decorated is not None:
        _write_colored(writer, decorated, border_color, bright_border)
    _write_colored(writer, BOX_H * right, border_color, bright_border)
    _write_colored(writer, BOX_TR, border_color, bright_border)

    for row in range(inner_height):
        line = lines[row] if row < len(lines) else ""
        goto(y + 1 + row, x, writer)
        _write_colored(writer, BOX_V, border_color, bright_border)
        if inner_width > 0:
            _write_colored(writer, line.ljust(inner_width), text_color, bright_text)
        _write_colored(writer, BOX_V, border_color, bright_border)

    goto(y + height - 1, x, writer)
    _write_colored(writer, BOX_BL, border_color, bright_border)
    _write_colored(writer, BOX_H * inner_width, border_color, bright_border)
    _write_colored(writer, BOX_BR, border_color, bright_border)


def show_box_row(
    contents: list[str] | None,
    line_color: AnsiColor | None = AnsiColor.YELLOW,
    text_color: AnsiColor | None = AnsiColor.WHITE,
    writer: TextIO | None = None,
):
    """
    Draw a one-row box at the cursor with a cell per string.

    Empty strings are skipped; nothing is drawn when no cells remain.
    """
    cells = [c for c in (contents or []) if c]
    if not cells:
        return

    write("\r", writer)

    top = BOX_T_DOWN.join(BOX_H * (len(c) + 2) for c in cells)
    _write_colored(writer, f"{BOX_TL}{top}{BOX_TR}\n", line_color, False)

    for cell in cells:
        _write_colored(writer, f"{BOX_V} ", line_color, False)
        _write_colored(writer, cell, text_color, False)
        _write_colored(writer, " ", line_color, False)
    _write_colored(writer, f"{BOX_V}\n", line_color, False)

    bottom = BOX_T_UP.join(BOX_H * (len(c) + 2) for c in cells)
    _write_colored(writer, f"{BOX_BL}{bottom}{BOX_BR}\n", line_color, False)
