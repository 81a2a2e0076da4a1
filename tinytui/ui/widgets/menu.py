"""
Interactive menu widget.

Keyboard-driven single- or multi-select menu rendered inline below a prompt.
"""

import threading
from contextlib import nullcontext
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence, TextIO

from ..primitives import (
    AnsiColor,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_SPACE,
    KEY_UP,
    ambient_state,
    cbreak_noecho,
    clear_line,
    flush,
    getch,
    getch_with_timeout,
    hide_cursor,
    move_up,
    set_foreground,
    terminal_lock,
    write,
)

SINGLE_SELECT_PROMPT = "Select an option:"
MULTI_SELECT_PROMPT = "Select one or more options:"
SINGLE_SELECT_HINT = "Enter=Confirm  Esc=Cancel  Q=Quit"
MULTI_SELECT_HINT = "Enter=Confirm  Space=Toggle  Esc=Cancel  Q=Quit"

CURSOR_MARKER = "> "
NO_CURSOR_MARKER = "  "
CHECKED = "[x] "
UNCHECKED = "[ ] "


@dataclass
class MenuItem:
    """A selectable menu item. value defaults to the name."""
    name: str
    value: Any = None
    selected: bool = False

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Menu item name must not be empty.")
        if self.value is None:
            self.value = self.name


class MenuExitReason(Enum):
    CONFIRMED = "confirmed"
    ESCAPE = "escape"
    QUIT = "quit"
    CANCELLED = "cancelled"  # cancel_event was set while waiting for a key


@dataclass
class MenuSelectionResult:
    """Result from a menu session."""
    selected_items: list[MenuItem] = field(default_factory=list)
    reason: MenuExitReason = MenuExitReason.CONFIRMED

    @property
    def primary_item(self) -> MenuItem | None:
        return self.selected_items[0] if self.selected_items else None

    @property
    def values(self) -> list[Any]:
        return [item.value for item in self.selected_items]


def _blocking_key() -> str:
    return getch(return_special_keys=True)


def _polling_key(timeout_ms: int) -> str | None:
    return getch_with_timeout(timeout_ms, return_special_keys=True)


class MenuSession:
    """
    One run of an interactive menu over a caller-owned list of items.

    The items list is referenced, not copied: toggling in multi-select mode
    updates each item's selected flag in place, and those flags survive
    the session.

    Keys come from read_key, which returns KEY_* identifiers or single
    characters. Without a cancel_event it is called with no arguments and
    may block; with one it is called as read_key(timeout_ms) and returns
    None on timeout so the event can be checked between keys.
    """

    def __init__(
        self,
        prompt: str | None,
        items: Sequence[MenuItem],
        multi_select: bool = False,
        prompt_color: AnsiColor | None = None,
        highlight_color: AnsiColor | None = AnsiColor.WHITE,
        selection_color: AnsiColor | None = AnsiColor.CYAN,
        *,
        writer: TextIO | None = None,
        read_key: Callable[..., str | None] | None = None,
        cancel_event: threading.Event | None = None,
        poll_interval_ms: int = 100,
    ):
        if items is None:
            raise TypeError("items must not be None")
        if len(items) == 0:
            raise ValueError("Menu must contain at least one item.")
        if poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive")

        if prompt is None or not prompt.strip():
            prompt = MULTI_SELECT_PROMPT if multi_select else SINGLE_SELECT_PROMPT

        self.prompt = prompt.strip()
        self.items = items
        self.multi_select = multi_select
        self.prompt_color = prompt_color
        self.highlight_color = highlight_color
        self.selection_color = selection_color
        self.writer = writer
        self.cancel_event = cancel_event
        self.poll_interval_ms = poll_interval_ms

        self._owns_input = read_key is None
        if read_key is None:
            read_key = _polling_key if cancel_event is not None else _blocking_key
        self._read_key = read_key

        self.cursor_index = 0
        self._painted = False
        # Foreground in effect when the session started; "other" rows use it
        self._base_color: AnsiColor | None = None
        self._base_bright = False

    @property
    def last_index(self) -> int:
        return len(self.items) - 1

    # -- state transitions -------------------------------------------------

    def move_cursor(self, delta: int):
        """Move the cursor, clamped to the first and last item."""
        self.cursor_index = max(0, min(self.cursor_index + delta, self.last_index))

    def toggle_selection(self):
        current = self.items[self.cursor_index]
        current.selected = not current.selected

    def handle_key(self, key: str) -> MenuExitReason | None:
        """
        Apply one key to the menu state.

        Returns the exit reason for Enter/Esc/Q, otherwise None. Keys the
        menu doesn't use are ignored.
        """
        if key == KEY_DOWN:
            self.move_cursor(1)
        elif key == KEY_UP:
            self.move_cursor(-1)
        elif key == KEY_SPACE:
            if self.multi_select:
                self.toggle_selection()
        elif key == KEY_ENTER:
            return MenuExitReason.CONFIRMED
        elif key == KEY_ESC:
            return MenuExitReason.ESCAPE
        elif isinstance(key, str) and key.upper() == "Q":
            return MenuExitReason.QUIT
        return None

    def build_result(self, reason: MenuExitReason) -> MenuSelectionResult:
        """
        Build the result for an exit reason.

        Only a confirm selects anything. In multi-select mode the toggled
        items win; with nothing toggled (or in single-select mode) the item
        under the cursor is returned, never an empty list.
        """
        if reason != MenuExitReason.CONFIRMED:
            return MenuSelectionResult([], reason)

        if self.multi_select:
            selected = [item for item in self.items if item.selected]
            if selected:
                return MenuSelectionResult(selected, reason)

        return MenuSelectionResult([self.items[self.cursor_index]], reason)

    # -- rendering ---------------------------------------------------------

    def _render_prompt(self):
        write("\n", self.writer)
        if self.prompt_color is not None:
            set_foreground(self.prompt_color, writer=self.writer)
        write(self.prompt, self.writer)
        set_foreground(self._base_color, self._base_bright, self.writer)
        write("\n", self.writer)

    def _render_item(self, index: int, item: MenuItem):
        is_current = index == self.cursor_index
        row_color = self.highlight_color if is_current else self._base_color
        row_bright = False if is_current else self._base_bright

        set_foreground(row_color, row_bright, self.writer)
        write(CURSOR_MARKER if is_current else NO_CURSOR_MARKER, self.writer)
        if self.multi_select:
            set_foreground(self.selection_color, False, self.writer)
            write(CHECKED if item.selected else UNCHECKED, self.writer)
            set_foreground(row_color, row_bright, self.writer)
        write(item.name, self.writer)

    def render(self):
        """Redraw every item row and the instructions line."""
        if self._painted:
            # Cursor sits on the instructions line; go back to the first item row
            write("\r", self.writer)
            move_up(len(self.items), self.writer)

        for index, item in enumerate(self.items):
            write("\r", self.writer)
            clear_line(self.writer)
            self._render_item(index, item)
            write("\n", self.writer)

        write("\r", self.writer)
        clear_line(self.writer)
        set_foreground(self._base_color, self._base_bright, self.writer)
        write(MULTI_SELECT_HINT if self.multi_select else SINGLE_SELECT_HINT, self.writer)
        flush(self.writer)
        self._painted = True

    # -- event loop ----------------------------------------------------------

    def _next_key(self) -> str | None:
        """Wait for the next key; None means the session was cancelled."""
        if self.cancel_event is None:
            return self._read_key()

        while not self.cancel_event.is_set():
            key = self._read_key(self.poll_interval_ms)
            if key is not None:
                return key
        return None

    def _event_loop(self) -> MenuSelectionResult:
        while True:
            key = self._next_key()
            if key is None:
                return self.build_result(MenuExitReason.CANCELLED)

            reason = self.handle_key(key)
            if reason is not None:
                return self.build_result(reason)

            if key in (KEY_UP, KEY_DOWN) or (key == KEY_SPACE and self.multi_select):
                self.render()

    def run(self) -> MenuSelectionResult:
        """Show the menu and block until the user confirms or backs out."""
        with terminal_lock, ambient_state(self.writer) as ambient:
            self._base_color = ambient.foreground
            self._base_bright = ambient.bright_foreground
            input_mode = cbreak_noecho() if self._owns_input else nullcontext()
            with input_mode:
                hide_cursor(self.writer)
                try:
                    self._render_prompt()
                    self.render()
                    return self._event_loop()
                finally:
                    if self._painted:
                        # Leave the cursor below the instructions line
                        write("\n\n", self.writer)
                    flush(self.writer)


def show_menu(
    prompt: str | None,
    items: Sequence[MenuItem],
    multi_select: bool = False,
    prompt_color: AnsiColor | None = None,
    highlight_color: AnsiColor | None = AnsiColor.WHITE,
    selection_color: AnsiColor | None = AnsiColor.CYAN,
    **kwargs,
) -> MenuSelectionResult:
    """
    Show a menu and return what the user picked.

    Raises:
        TypeError: If items is None
        ValueError: If items is empty
    """
    session = MenuSession(
        prompt,
        items,
        multi_select,
        prompt_color,
        highlight_color,
        selection_color,
        **kwargs,
    )
    return session.run()
