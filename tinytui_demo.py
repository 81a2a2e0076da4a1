#!/usr/bin/env python3
"""
tinytui demo - tour of the escape helpers, size probe, boxes, menu and spinner.

Subcommands:
    demo    full-screen showcase (default)
    probe   ask the terminal for its size
    menu    run a menu over the given items
    box     draw a box around the given text
"""

import argparse
import io
import signal
import sys
import time
from pathlib import Path

from tinytui import __version__
from tinytui.config import TuiSettings
from tinytui.core.logging import TeeOutput, debug_log
from tinytui.core.paths import get_session_log_path, get_settings_path
from tinytui.ui.components import show_box, show_box_row
from tinytui.ui.primitives import (
    AnsiColor,
    AnsiStyle,
    CancelInput,
    LineClearMode,
    clear_line,
    clear_screen,
    flush_input,
    get_window_size,
    goto,
    hide_cursor,
    move_down,
    move_left,
    move_right,
    move_up,
    probe_size,
    reset_scroll_region,
    reset_style,
    restore_cursor,
    save_cursor,
    set_colors,
    set_scroll_region,
    set_style,
    show_cursor,
    truncate_text,
    use_utf8,
    wait_for_key,
    write,
    write_at,
)
from tinytui.ui.widgets import MenuExitReason, MenuItem, show_menu, spinner

SIMULATED_REPLY = "\x1b[24;80R"


# ============================================================================
# Demo
# ============================================================================


class DemoApp:
    """Full-screen showcase of the escape helpers and widgets."""

    def __init__(self, settings: TuiSettings, pause: float = 1.0):
        self.settings = settings
        self.pause = pause
        self.window = get_window_size()
        self.row = 3

    def _sleep(self, seconds: float):
        time.sleep(seconds * self.pause)

    def _line(self, text: str, column: int = 1):
        write_at(self.row, column, text)
        self.row += 1

    def cleanup(self):
        """Put the terminal back: plain style, visible cursor, last row."""
        reset_scroll_region()
        reset_style()
        show_cursor()
        end = get_window_size()
        goto(max(1, end.rows), 1)
        write("\n")
        sys.stdout.flush()

    def header(self):
        title = f" tinytui v{__version__} demo "
        title = truncate_text(title, self.window.columns).ljust(self.window.columns)
        set_style(AnsiStyle.INVERSE)
        write_at(1, 1, title)
        reset_style()

    def sizes(self):
        sample = probe_size(io.StringIO(SIMULATED_REPLY), writer=io.StringIO())
        self._line(f"Window size => {self.window.columns}x{self.window.rows}")
        self._line(f"probe_size sample parse => {sample.columns}x{sample.rows} (simulated reply)")
        if not sys.stdin.isatty():
            self._line("Run in a real terminal and use `tinytui-demo probe` for live dimensions.")

    def palette(self):
        self.row += 1
        self._line("Color palette:")
        for color in AnsiColor:
            write_at(self.row, 2, f"{color.name.title():<7}: ")
            set_colors(foreground=color)
            write("normal ")
            set_colors(foreground=color, bright_foreground=True)
            write("bright")
            reset_style()
            self.row += 1

        self.row += 1
        self._line("Background colors:")
        set_colors(foreground=AnsiColor.WHITE, background=AnsiColor.BLUE)
        write(" standard bg ")
        set_colors(foreground=AnsiColor.BLACK, background=AnsiColor.YELLOW, bright_background=True)
        write(" bright bg ")
        reset_style()

        self.row += 1
        self._line("Styles:")
        for style in (AnsiStyle.BOLD, AnsiStyle.UNDERLINE, AnsiStyle.INVERSE):
            set_style(style)
            write(f" {style.name.lower()} ")
            reset_style()

    def line_clearing(self):
        self.row += 1
        write_at(self.row, 1, "clear_line demo: this disappears shortly...")
        sys.stdout.flush()
        self._sleep(3)
        clear_line()
        self._line("clear_line demo complete.")

        write_at(self.row, 1, "Partial clear_line demo >>> text")
        sys.stdout.flush()
        self._sleep(3)
        goto(self.row, 25)
        clear_line(mode=LineClearMode.TO_END)
        self._line("Partial clear_line demo complete.")

    def cursor_moves(self):
        self.row += 1
        self._line("Save/restore cursor with progress:")
        save_cursor()
        for step in range(11):
            write_at(self.row - 1, 40, f"{step * 10:3}%")
            sys.stdout.flush()
            self._sleep(0.3)
        restore_cursor()
        write(" cursor restored.")

        self.row += 2
        self._line("Relative moves:")
        goto(self.row, 4)
        for move, arrow in ((None, "•"), (move_right, "→"), (move_down, "↓"),
                            (move_left, "←"), (move_up, "↑")):
            if move is not None:
                move(5 if move in (move_right, move_left) else 1)
            write(arrow)
            sys.stdout.flush()
            self._sleep(1)
        self.row += 3

    def spinner_demo(self):
        goto(self.row, 1)
        spinner(lambda: self._sleep(3), "Spinner demo", interval=self.settings.spinner_interval)
        self._line("Spinner demo complete.")

    def boxes(self):
        self.row += 1
        if self.row + 6 >= self.window.rows:
            return
        show_box(2, self.row, 36, 5, "show_box", ["Bordered text, wrapped to fit the box width."],
                 border_color=AnsiColor.CYAN, text_color=AnsiColor.WHITE, bright_text=True)
        self.row += 6
        goto(self.row, 1)
        show_box_row(["probe", "menu", "spinner", "box"])
        self.row += 3

    def scroll_region(self):
        if self.window.rows - self.row > 6:
            log_top = self.window.rows - 4
            write_at(log_top - 1, 1, "Scroll region demo (last 4 rows):")
            set_scroll_region(log_top, self.window.rows)
            goto(log_top, 1)
            for i in range(1, 20):
                write(f"log message {i}\n")
                sys.stdout.flush()
                self._sleep(0.1)
            reset_scroll_region()
        else:
            self._line("Resize taller to see scroll region demo.")

    def run(self):
        def _on_sigint(signum, frame):
            self.cleanup()
            sys.exit(0)

        signal.signal(signal.SIGINT, _on_sigint)
        hide_cursor()
        try:
            clear_screen()
            self.header()
            self.sizes()
            self.palette()
            self.line_clearing()
            self.cursor_moves()
            self.spinner_demo()
            self.boxes()
            self.scroll_region()

            goto(self.window.rows, 1)
            show_cursor()
            try:
                wait_for_key("Press Enter to exit...")
            except CancelInput:
                pass
        finally:
            self.cleanup()


# ============================================================================
# Subcommands
# ============================================================================


def cmd_demo(args, settings: TuiSettings) -> int:
    DemoApp(settings, pause=args.pause).run()
    return 0


def cmd_probe(args, settings: TuiSettings) -> int:
    timeout = args.timeout if args.timeout is not None else settings.probe_timeout
    if not sys.stdin.isatty():
        print("stdin is not a terminal; reporting window size instead.", file=sys.stderr)
        size = get_window_size()
    else:
        save_cursor()
        size = probe_size(timeout=timeout)
        restore_cursor()
        # A reply that arrived after the deadline would otherwise show up as typed keys
        flush_input()
    debug_log(f"probe: {size.columns}x{size.rows}")
    print(f"{size.columns}x{size.rows}")
    return 0


def cmd_menu(args, settings: TuiSettings) -> int:
    items = [MenuItem(name) for name in args.items]
    result = show_menu(args.prompt, items, multi_select=args.multi, **settings.menu_colors())
    print(f"reason: {result.reason.value}")
    for value in result.values:
        print(f"  {value}")
    return 0 if result.reason == MenuExitReason.CONFIRMED else 1


def cmd_box(args, settings: TuiSettings) -> int:
    if args.row is None:
        clear_screen()
        row = 1
    else:
        row = args.row
    show_box(args.column, row, args.width, args.height, args.title, args.text,
             border_color=AnsiColor.YELLOW)
    goto(row + args.height, 1)
    write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinytui-demo",
        description="tinytui - ANSI escape helpers, size probe, menu and box demo",
    )
    parser.add_argument("--settings", type=Path, default=None,
                        help="settings file (default: ~/.tinytui/settings.json)")
    parser.add_argument("--log", nargs="?", const="", default=None,
                        help="also write a plain-text session log (default: ~/.tinytui/logs/)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(func=cmd_demo, pause=1.0)
    sub = parser.add_subparsers(dest="command")

    demo = sub.add_parser("demo", help="full-screen showcase")
    demo.add_argument("--pause", type=float, default=1.0,
                      help="scale factor for the pauses between steps")
    demo.set_defaults(func=cmd_demo)

    probe = sub.add_parser("probe", help="probe the terminal size")
    probe.add_argument("--timeout", type=float, default=None,
                       help="seconds to wait for the reply (default from settings)")
    probe.set_defaults(func=cmd_probe)

    menu = sub.add_parser("menu", help="pick from a list of items")
    menu.add_argument("items", nargs="+")
    menu.add_argument("--multi", action="store_true", help="allow selecting several items")
    menu.add_argument("--prompt", default=None)
    menu.set_defaults(func=cmd_menu)

    box = sub.add_parser("box", help="draw a box around some text")
    box.add_argument("text", nargs="*")
    box.add_argument("--title", default=None)
    box.add_argument("--width", type=int, default=40)
    box.add_argument("--height", type=int, default=6)
    box.add_argument("--column", type=int, default=1)
    box.add_argument("--row", type=int, default=None,
                     help="top row (default: clear the screen and use row 1)")
    box.set_defaults(func=cmd_box)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    use_utf8()
    settings = TuiSettings.load(args.settings or get_settings_path())

    tee = None
    if args.log is not None:
        log_path = Path(args.log) if args.log else get_session_log_path()
        tee = TeeOutput(log_path, version=__version__)
        sys.stdout = tee

    try:
        return args.func(args, settings)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    finally:
        if tee is not None:
            sys.stdout = tee.terminal
            tee.close()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(0)
