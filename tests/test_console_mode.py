"""Tests for the platform console-mode shims."""

import copy
import io
import os
import sys

import pytest

from tinytui.ui.primitives import cbreak_noecho
from tinytui.ui.primitives.console_mode import (
    ENABLE_ECHO_INPUT,
    ENABLE_LINE_INPUT,
    ENABLE_VIRTUAL_TERMINAL_INPUT,
    NullConsoleMode,
    PosixConsoleMode,
    WindowsConsoleMode,
    console_mode_for,
    input_mode_scope,
)

posix_only = pytest.mark.skipif(os.name == 'nt', reason="termios is POSIX only")


class FdStream:
    """Minimal stream exposing only fileno()."""

    def __init__(self, fd):
        self._fd = fd

    def fileno(self):
        return self._fd


class TestWindowsModeFlags:
    """Flag arithmetic only; no kernel32 calls are made."""

    @pytest.fixture
    def console(self):
        return WindowsConsoleMode.__new__(WindowsConsoleMode)

    def test_clears_echo_and_line_sets_vt(self, console):
        assert console.probe_mode(0x7) == 0x201

    def test_other_flags_kept(self, console):
        mode = 0x80 | ENABLE_ECHO_INPUT | ENABLE_LINE_INPUT
        new_mode = console.probe_mode(mode)
        assert new_mode & 0x80
        assert not new_mode & (ENABLE_ECHO_INPUT | ENABLE_LINE_INPUT)
        assert new_mode & ENABLE_VIRTUAL_TERMINAL_INPUT

    def test_already_adjusted_mode_is_stable(self, console):
        assert console.probe_mode(0x201) == 0x201


@posix_only
class TestPosixModeFlags:
    @pytest.fixture
    def attrs(self):
        import termios

        cc = [0] * termios.NCCS
        cc[termios.VMIN] = 0
        cc[termios.VTIME] = 5
        lflag = termios.ECHO | termios.ICANON | termios.ISIG
        return [0, 0, 0, lflag, 38400, 38400, cc]

    def test_cbreak_without_echo(self, attrs):
        import termios

        new_mode = PosixConsoleMode(0).probe_mode(attrs)
        assert new_mode[3] == termios.ISIG
        assert new_mode[6][termios.VMIN] == 1
        assert new_mode[6][termios.VTIME] == 0

    def test_input_not_mutated(self, attrs):
        before = copy.deepcopy(attrs)
        PosixConsoleMode(0).probe_mode(attrs)
        assert attrs == before


@posix_only
class TestRealTerminal:
    @pytest.fixture
    def pty_pair(self):
        pty = pytest.importorskip("pty")
        master, slave = pty.openpty()
        yield master, slave
        os.close(master)
        os.close(slave)

    def test_tty_gets_posix_mode(self, pty_pair):
        _, slave = pty_pair
        console = console_mode_for(FdStream(slave))
        assert isinstance(console, PosixConsoleMode)
        assert console.fd == slave

    def test_scope_turns_echo_off_and_back_on(self, pty_pair):
        import termios

        _, slave = pty_pair
        console = PosixConsoleMode(slave)
        before = termios.tcgetattr(slave)
        with input_mode_scope(console) as changed:
            assert changed
            assert not termios.tcgetattr(slave)[3] & termios.ECHO
        assert termios.tcgetattr(slave) == before

    def test_cbreak_noecho_uses_the_same_scope(self, pty_pair, monkeypatch):
        import termios

        _, slave = pty_pair
        monkeypatch.setattr(sys, "stdin", FdStream(slave))
        before = termios.tcgetattr(slave)
        with cbreak_noecho() as fd:
            assert fd == slave
            lflag = termios.tcgetattr(slave)[3]
            assert not lflag & (termios.ECHO | termios.ICANON)
        assert termios.tcgetattr(slave) == before

    def test_pipe_gets_null_mode(self):
        r, w = os.pipe()
        try:
            assert isinstance(console_mode_for(FdStream(r)), NullConsoleMode)
        finally:
            os.close(r)
            os.close(w)


def test_closed_stream_gets_null_mode():
    stream = io.StringIO()
    stream.close()
    assert isinstance(console_mode_for(stream), NullConsoleMode)
