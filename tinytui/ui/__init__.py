"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (escape sequences, keyboard, console modes, size probe)
- components/: Visual building blocks (box)
- widgets/: Interactive reusable pieces (menu, spinner)
"""

# Re-export commonly used items for convenience
from .primitives import (
    # Terminal
    AnsiColor,
    AnsiStyle,
    LineClearMode,
    TerminalSize,
    clear_screen,
    clear_line,
    goto,
    write_at,
    hide_cursor,
    show_cursor,
    set_style,
    set_colors,
    reset_style,
    get_window_size,
    use_utf8,
    # Size probe
    probe_size,
    parse_cursor_response,
    # Keyboard
    getch,
    wait_for_key,
    CancelInput,
    KEY_UP,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_SPACE,
)
from .components import (
    show_box,
    show_box_row,
)
from .widgets import (
    MenuItem,
    MenuExitReason,
    MenuSelectionResult,
    MenuSession,
    show_menu,
    Spinner,
    spinner,
)

__all__ = [
    # Primitives
    "AnsiColor",
    "AnsiStyle",
    "LineClearMode",
    "TerminalSize",
    "clear_screen",
    "clear_line",
    "goto",
    "write_at",
    "hide_cursor",
    "show_cursor",
    "set_style",
    "set_colors",
    "reset_style",
    "get_window_size",
    "use_utf8",
    "probe_size",
    "parse_cursor_response",
    "getch",
    "wait_for_key",
    "CancelInput",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_ENTER",
    "KEY_ESC",
    "KEY_SPACE",
    # Components
    "show_box",
    "show_box_row",
    # Widgets
    "MenuItem",
    "MenuExitReason",
    "MenuSelectionResult",
    "MenuSession",
    "show_menu",
    "Spinner",
    "spinner",
]
