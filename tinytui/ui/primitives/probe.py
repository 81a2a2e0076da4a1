"""
Terminal size probing.

Asks the terminal where the cursor ended up after a far-away goto and
parses the device status report it sends back.
"""

import os
import sys
import time

from ...core.logging import debug_log
from .console_mode import ConsoleMode, console_mode_for, input_mode_scope
from .terminal import (
    CSI,
    TerminalSize,
    flush,
    get_window_size,
    goto,
    terminal_lock,
    write,
)

if os.name == 'nt':
    import msvcrt
else:
    import select

PROBE_ROW = 9999
PROBE_COLUMN = 9999
REPLY_TERMINATOR = 'R'


def parse_cursor_response(response: str) -> tuple[int, int] | None:
    """
    Parse a cursor position report of the form ESC[row;columnR.

    Noise before the first '[' is ignored. Returns (row, column), or None
    if the markers are missing or out of order or the payload isn't exactly
    two integers separated by ';'.
    """
    start = response.find('[')
    end = response.find(REPLY_TERMINATOR)
    if start == -1 or end == -1 or end <= start:
        return None

    parts = response[start + 1:end].split(';')
    if len(parts) != 2:
        return None

    # Plain decimal digits only: int() would also take signs, spaces and underscores
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    return int(parts[0]), int(parts[1])


def _fileno(reader) -> int | None:
    try:
        return reader.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _wait_readable(fd: int, deadline: float) -> bool:
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        return False
    if os.name == 'nt':
        while time.monotonic() < deadline:
            if msvcrt.kbhit():
                return True
            time.sleep(0.01)
        return False
    return bool(select.select([fd], [], [], remaining)[0])


def read_reply(reader, timeout: float | None = None) -> str:
    """
    Read characters until the reply terminator or end of input.

    With a timeout and a reader backed by a file descriptor, each character
    waits at most until the deadline; running out of time ends the read
    like end of input does.
    """
    fd = _fileno(reader) if timeout is not None else None
    deadline = time.monotonic() + timeout if timeout is not None else None

    buffer = []
    while True:
        try:
            if fd is not None:
                if not _wait_readable(fd, deadline):
                    debug_log(f"size probe: no reply within {timeout}s")
                    break
                # Bypass the text buffer so select() sees every pending byte
                ch = os.read(fd, 1).decode('ascii', errors='replace')
            else:
                ch = reader.read(1)
        except OSError as e:
            debug_log(f"size probe: read failed: {e}")
            break
        except UnicodeDecodeError as e:
            debug_log(f"size probe: undecodable reply byte: {e}")
            break

        if not ch:
            break
        buffer.append(ch)
        if ch == REPLY_TERMINATOR:
            break

    return ''.join(buffer)


def probe_size(
    reader=None,
    writer=None,
    *,
    console_mode: ConsoleMode | None = None,
    timeout: float | None = None,
) -> TerminalSize:
    """
    Discover the screen size by moving the cursor to 9999;9999 and asking
    the terminal where it landed.

    Args:
        reader: Character source for the reply (defaults to sys.stdin).
                Anything with read(1) that returns '' at end of input works.
        writer: Sink for the query (defaults to sys.stdout).
        console_mode: Input-mode shim; picked from the reader when omitted.
        timeout: Optional deadline in seconds for the reply.

    Returns the probed size, or the OS-reported window size when the reply
    is missing or malformed.
    """
    if reader is None:
        reader = sys.stdin
    if console_mode is None:
        console_mode = console_mode_for(reader)

    with terminal_lock:
        # Echo is off before the query goes out so the reply never hits the screen
        with input_mode_scope(console_mode):
            goto(PROBE_ROW, PROBE_COLUMN, writer)
            write(CSI + "6n", writer)
            flush(writer)
            reply = read_reply(reader, timeout)

    parsed = parse_cursor_response(reply)
    if parsed is not None:
        rows, columns = parsed
        return TerminalSize(columns, rows)

    debug_log(f"size probe: unparseable reply {reply!r}, using window size")
    return get_window_size()
