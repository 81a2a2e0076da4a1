"""
Spinner widget.

Animates a braille spinner on the current line from a background thread
while the caller's work runs in the foreground.
"""

import threading
from typing import Callable, TextIO

from ..primitives import CSI, AnsiColor, ambient_state, fg_code, flush, get_state, set_foreground, write

SPINNER_FRAMES = [
    "⣾⣿", "⣽⣿", "⣻⣿", "⢿⣿", "⡿⣿", "⣟⣿", "⣯⣿", "⣷⣿",
    "⣿⣾", "⣿⣽", "⣿⣻", "⣿⢿", "⣿⡿", "⣿⣟", "⣿⣯", "⣿⣷",
]


class Spinner:
    """
    Background-painted spinner with a stop token.

    stop() signals the painter, waits for it to finish, then erases the
    last frame, so nothing is left on the line afterwards.
    """

    def __init__(
        self,
        label: str,
        writer: TextIO | None = None,
        interval: float = 0.1,
        color: AnsiColor | None = AnsiColor.GREEN,
    ):
        if label is None:
            raise TypeError("label must not be None")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.label = label
        self.writer = writer
        self.interval = interval
        self.color = color

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._last_frame_length = 0
        self.frames_drawn = 0

    def _write_frame(self, symbol: str):
        with self._lock:
            if self.color is not None:
                # Raw SGR: the painter thread must not touch the tracked ambient state
                write(f"{CSI}{fg_code(self.color)}m", self.writer)
            write(f"\r{symbol} {self.label}", self.writer)
            flush(self.writer)
            self._last_frame_length = len(symbol) + 1 + len(self.label)
            self.frames_drawn += 1

    def _clear_frame(self):
        with self._lock:
            write("\r", self.writer)
            if self._last_frame_length > 0:
                write(" " * self._last_frame_length + "\r", self.writer)
            if self.color is not None and self.frames_drawn:
                state = get_state()
                set_foreground(state.foreground, state.bright_foreground, self.writer)
            flush(self.writer)
            self._last_frame_length = 0

    def _paint_worker(self):
        index = 0
        while not self._stop_event.is_set():
            self._write_frame(SPINNER_FRAMES[index])
            index = (index + 1) % len(SPINNER_FRAMES)
            # Returns early when stop() is called
            self._stop_event.wait(self.interval)

    def start(self):
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._paint_worker, daemon=True)
        self._thread.start()

    def stop(self):
        """Stop painting and erase the last frame."""
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        self._clear_frame()

    @property
    def running(self) -> bool:
        return self._thread is not None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


def spinner(
    action: Callable[[], object],
    label: str,
    writer: TextIO | None = None,
    interval: float = 0.1,
):
    """
    Run action() while showing a spinner; returns whatever action returns.

    Exceptions from action propagate after the spinner is cleaned up.

    Raises:
        TypeError: If action or label is None
    """
    if action is None:
        raise TypeError("action must not be None")
    if label is None:
        raise TypeError("label must not be None")

    with ambient_state(writer):
        with Spinner(label, writer=writer, interval=interval):
            return action()
