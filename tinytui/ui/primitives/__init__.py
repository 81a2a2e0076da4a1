"""
Terminal I/O primitives.

Escape-sequence output, keyboard input, console modes, and size probing.
"""

from .colors import (
    AnsiColor,
    AnsiStyle,
    LineClearMode,
    fg_code,
    bg_code,
    parse_color,
)
from .terminal import (
    CSI,
    TerminalSize,
    TerminalState,
    terminal_lock,
    get_state,
    strip_ansi,
    truncate_text,
    write,
    flush,
    use_utf8,
    clear_screen,
    clear_line,
    goto,
    move_up,
    move_down,
    move_right,
    move_left,
    write_at,
    save_cursor,
    restore_cursor,
    hide_cursor,
    show_cursor,
    set_scroll_region,
    reset_scroll_region,
    set_style,
    set_colors,
    set_foreground,
    reset_style,
    ambient_state,
    get_window_size,
)
from .console_mode import (
    ConsoleMode,
    NullConsoleMode,
    PosixConsoleMode,
    WindowsConsoleMode,
    console_mode_for,
    input_mode_scope,
)
from .keyboard_input import (
    CancelInput,
    raw_terminal,
    cbreak_noecho,
    decode_key,
    getch,
    getch_with_timeout,
    wait_for_key,
    flush_input,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_ENTER,
    KEY_ESC,
    KEY_BACKSPACE,
    KEY_TAB,
    KEY_SPACE,
)
from .probe import (
    parse_cursor_response,
    read_reply,
    probe_size,
)

__all__ = [
    # Colors
    "AnsiColor",
    "AnsiStyle",
    "LineClearMode",
    "fg_code",
    "bg_code",
    "parse_color",
    # Terminal
    "CSI",
    "TerminalSize",
    "TerminalState",
    "terminal_lock",
    "get_state",
    "strip_ansi",
    "truncate_text",
    "write",
    "flush",
    "use_utf8",
    "clear_screen",
    "clear_line",
    "goto",
    "move_up",
    "move_down",
    "move_right",
    "move_left",
    "write_at",
    "save_cursor",
    "restore_cursor",
    "hide_cursor",
    "show_cursor",
    "set_scroll_region",
    "reset_scroll_region",
    "set_style",
    "set_colors",
    "set_foreground",
    "reset_style",
    "ambient_state",
    "get_window_size",
    # Console modes
    "ConsoleMode",
    "NullConsoleMode",
    "PosixConsoleMode",
    "WindowsConsoleMode",
    "console_mode_for",
    "input_mode_scope",
    # Keyboard input
    "CancelInput",
    "raw_terminal",
    "cbreak_noecho",
    "decode_key",
    "getch",
    "getch_with_timeout",
    "wait_for_key",
    "flush_input",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_ENTER",
    "KEY_ESC",
    "KEY_BACKSPACE",
    "KEY_TAB",
    "KEY_SPACE",
    # Size probe
    "parse_cursor_response",
    "read_reply",
    "probe_size",
]
