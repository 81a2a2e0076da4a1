"""
Keyboard input handling for tinytui.

Reads single keystrokes without echo and maps arrow/control keys to
KEY_* identifiers so widgets never deal with raw escape sequences.
"""

import os
import sys
import time
from contextlib import contextmanager

from .console_mode import PosixConsoleMode, input_mode_scope

# Platform-specific imports
if os.name == 'nt':
    import msvcrt
else:
    import fcntl
    import select
    import termios
    import tty


class CancelInput(Exception):
    """Raised when user cancels input with ESC."""
    pass


@contextmanager
def raw_terminal():
    """Context manager for raw terminal mode (Unix only, no-op on Windows)."""
    if os.name == 'nt':
        yield None
    else:
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


@contextmanager
def cbreak_noecho():
    """Echo and line buffering off for the block (POSIX; no-op on Windows).

    Unlike raw mode, output processing stays on so newlines still work.
    """
    if os.name == 'nt':
        yield None
        return

    fd = sys.stdin.fileno()
    with input_mode_scope(PosixConsoleMode(fd)):
        yield fd


def read_escape_sequence(fd) -> str:
    """
    Read remaining characters of an escape sequence after ESC was detected.

    Returns the extra characters (not including the initial ESC), or '' for a
    standalone ESC. Unix only.
    """
    if os.name == 'nt':
        return ''

    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        # Wait briefly for the rest of the sequence
        select.select([sys.stdin], [], [], 0.005)
        extra = ''
        try:
            extra = sys.stdin.read(10) or ''
        except (IOError, BlockingIOError):
            pass
        return extra
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


# Special key constants
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_ENTER = "KEY_ENTER"
KEY_ESC = "KEY_ESC"
KEY_BACKSPACE = "KEY_BACKSPACE"
KEY_TAB = "KEY_TAB"
KEY_SPACE = "KEY_SPACE"

UNIX_ESCAPE_CODES = {
    '[A': KEY_UP,
    '[B': KEY_DOWN,
    '[C': KEY_RIGHT,
    '[D': KEY_LEFT,
    'OA': KEY_UP,
    'OB': KEY_DOWN,
    'OC': KEY_RIGHT,
    'OD': KEY_LEFT,
}

WINDOWS_KEY_CODES = {
    b'H': KEY_UP,
    b'P': KEY_DOWN,
    b'K': KEY_LEFT,
    b'M': KEY_RIGHT,
}

# char -> (KEY_* constant, raw char for non-special mode)
UNIX_SPECIAL_CHARS = {
    '\r': (KEY_ENTER, '\r'),
    '\n': (KEY_ENTER, '\n'),
    '\x7f': (KEY_BACKSPACE, '\x7f'),
    '\x08': (KEY_BACKSPACE, '\x08'),
    '\t': (KEY_TAB, '\t'),
    ' ': (KEY_SPACE, ' '),
}

WINDOWS_SPECIAL_CHARS = {
    b'\r': (KEY_ENTER, '\r'),
    b'\x08': (KEY_BACKSPACE, '\x08'),
    b'\t': (KEY_TAB, '\t'),
    b' ': (KEY_SPACE, ' '),
}


def decode_key(ch: str, extra: str = '', return_special_keys: bool = True) -> str:
    """
    Map a character read in raw mode (plus any escape-sequence tail) to a key.

    Returns a KEY_* constant when return_special_keys is set, the raw
    character otherwise, and '' for escape sequences that aren't recognised.
    """
    if ch in UNIX_SPECIAL_CHARS:
        key, raw = UNIX_SPECIAL_CHARS[ch]
        return key if return_special_keys else raw

    if ch == '\x1b':
        if not extra:
            return KEY_ESC if return_special_keys else '\x1b'
        if return_special_keys:
            return UNIX_ESCAPE_CODES.get(extra, '')
        return ''

    return ch


def _getch_windows(return_special_keys: bool) -> str:
    ch = msvcrt.getch()

    # Arrow keys send two bytes: 0xe0 or 0x00 followed by key code
    if ch in (b'\xe0', b'\x00'):
        key_code = msvcrt.getch()
        if return_special_keys:
            return WINDOWS_KEY_CODES.get(key_code, '')
        return ''

    if ch == b'\x1b':
        if msvcrt.kbhit():
            # VT input mode: swallow the rest of the sequence
            while msvcrt.kbhit():
                msvcrt.getch()
            return ''
        return KEY_ESC if return_special_keys else '\x1b'

    if ch in WINDOWS_SPECIAL_CHARS:
        key, raw = WINDOWS_SPECIAL_CHARS[ch]
        return key if return_special_keys else raw

    return ch.decode('utf-8', errors='ignore')


def getch(return_special_keys: bool = False) -> str:
    """
    Read a single keystroke from stdin without echo.

    Args:
        return_special_keys: If True, return KEY_* constants for arrow keys,
                             Enter, Space, etc. If False, return raw characters
                             and '' for arrow keys.

    Blocks until a key is pressed.
    """
    if os.name == 'nt':
        return _getch_windows(return_special_keys)

    with raw_terminal() as fd:
        ch = sys.stdin.read(1)
        extra = read_escape_sequence(fd) if ch == '\x1b' else ''
        return decode_key(ch, extra, return_special_keys)


def getch_with_timeout(timeout_ms: int = 100, return_special_keys: bool = True) -> str | None:
    """
    Read a single keystroke with a timeout.

    Returns the key (see getch), or None if nothing arrived in time.
    """
    timeout_sec = timeout_ms / 1000.0

    if os.name == 'nt':
        end_time = time.monotonic() + timeout_sec
        while time.monotonic() < end_time:
            if msvcrt.kbhit():
                return _getch_windows(return_special_keys)
            time.sleep(0.01)
        return None

    with raw_terminal() as fd:
        if not select.select([sys.stdin], [], [], timeout_sec)[0]:
            return None
        ch = sys.stdin.read(1)
        extra = read_escape_sequence(fd) if ch == '\x1b' else ''
        return decode_key(ch, extra, return_special_keys)


def wait_for_key(prompt: str = "Press Enter to continue...", allow_esc: bool = True) -> bool:
    """
    Wait for Enter.

    Raises:
        CancelInput: If ESC is pressed and allow_esc is True
    """
    print(prompt, end='', flush=True)

    while True:
        ch = getch()

        if not ch:  # ignored key like an arrow
            continue
        elif ch == '\x1b' and allow_esc:
            print()
            raise CancelInput()
        elif ch in ('\r', '\n'):
            print()
            return True


def flush_input():
    """
    Drop any pending input from stdin.

    Call after a terminal query so a late reply doesn't turn into keystrokes.
    """
    if os.name == 'nt':
        while msvcrt.kbhit():
            msvcrt.getch()
        return

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    try:
        tty.setraw(fd)
        fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
        while True:
            try:
                ch = sys.stdin.read(1)
                if not ch:
                    break
            except (IOError, BlockingIOError):
                break
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
