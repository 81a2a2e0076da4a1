"""
Console input mode handling.

Wraps the platform's notion of an input mode (Windows console mode flags,
POSIX termios attributes) behind a tiny get/set interface so callers can
temporarily turn off echo and line buffering while reading a terminal reply.
"""

import os
from contextlib import contextmanager
from typing import Any, Protocol

from ...core.logging import debug_log

_IS_WINDOWS = os.name == 'nt'

if not _IS_WINDOWS:
    import termios

    _MODE_ERRORS = (OSError, termios.error)
else:
    _MODE_ERRORS = (OSError, AttributeError)

# Windows console input flags
STD_INPUT_HANDLE = -10
ENABLE_LINE_INPUT = 0x0002
ENABLE_ECHO_INPUT = 0x0004
ENABLE_VIRTUAL_TERMINAL_INPUT = 0x0200


class ConsoleMode(Protocol):
    """Get/set access to a console's input mode."""

    def get_mode(self) -> Any | None:
        """Return the current mode, or None if it cannot be read."""
        ...

    def set_mode(self, mode: Any) -> bool:
        """Apply a mode previously returned by get_mode/probe_mode."""
        ...

    def probe_mode(self, mode: Any) -> Any:
        """Derive the no-echo, unbuffered, escape-passthrough mode from mode."""
        ...


class NullConsoleMode:
    """Used where there is no console input mode to adjust."""

    def get_mode(self):
        return None

    def set_mode(self, mode) -> bool:
        return False

    def probe_mode(self, mode):
        return mode


class WindowsConsoleMode:
    """Console input mode via kernel32 GetConsoleMode/SetConsoleMode."""

    def __init__(self):
        import ctypes
        from ctypes import wintypes

        self._ctypes = ctypes
        self._wintypes = wintypes
        self._kernel32 = ctypes.windll.kernel32
        self._handle = self._kernel32.GetStdHandle(STD_INPUT_HANDLE)

    def get_mode(self):
        if not self._handle:
            return None
        mode = self._wintypes.DWORD()
        if not self._kernel32.GetConsoleMode(self._handle, self._ctypes.byref(mode)):
            return None
        return mode.value

    def set_mode(self, mode) -> bool:
        if not self._handle:
            return False
        return bool(self._kernel32.SetConsoleMode(self._handle, mode))

    def probe_mode(self, mode):
        new_mode = mode | ENABLE_VIRTUAL_TERMINAL_INPUT
        return new_mode & ~(ENABLE_ECHO_INPUT | ENABLE_LINE_INPUT)


class PosixConsoleMode:
    """Terminal input mode via termios attributes on a file descriptor."""

    def __init__(self, fd: int):
        self.fd = fd

    def get_mode(self):
        return termios.tcgetattr(self.fd)

    def set_mode(self, mode) -> bool:
        termios.tcsetattr(self.fd, termios.TCSADRAIN, mode)
        return True

    def probe_mode(self, mode):
        # cbreak with echo disabled: reply bytes arrive one at a time, unechoed
        new_mode = [list(part) if isinstance(part, list) else part for part in mode]
        new_mode[3] = new_mode[3] & ~(termios.ECHO | termios.ICANON)
        new_mode[6][termios.VMIN] = 1
        new_mode[6][termios.VTIME] = 0
        return new_mode


def console_mode_for(stream) -> ConsoleMode:
    """Pick the input-mode implementation for a stream.

    Only a real terminal has a mode worth changing; anything else (pipes,
    io.StringIO, test doubles) gets the no-op.
    """
    try:
        fd = stream.fileno()
        is_tty = os.isatty(fd)
    except (AttributeError, OSError, ValueError):
        return NullConsoleMode()
    if not is_tty:
        return NullConsoleMode()

    if _IS_WINDOWS:
        try:
            return WindowsConsoleMode()
        except _MODE_ERRORS as e:
            debug_log(f"console mode unavailable: {e}")
            return NullConsoleMode()
    return PosixConsoleMode(fd)


@contextmanager
def input_mode_scope(console: ConsoleMode):
    """Switch to the probe mode for the duration of the block.

    The previous mode is put back on every exit path. Failures to read or
    change the mode are logged and ignored; the caller just runs without
    the adjustment.
    """
    previous = None
    changed = False
    try:
        previous = console.get_mode()
        if previous is not None:
            new_mode = console.probe_mode(previous)
            if new_mode != previous:
                changed = console.set_mode(new_mode)
    except _MODE_ERRORS as e:
        debug_log(f"console mode change failed: {e}")

    try:
        yield changed
    finally:
        if changed:
            try:
                console.set_mode(previous)
            except _MODE_ERRORS as e:
                debug_log(f"console mode restore failed: {e}")
