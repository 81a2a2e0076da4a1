"""Tests for session logging (TeeOutput) and debug_log."""

import io
import sys
from pathlib import Path

import pytest

from tinytui.core.logging import TeeOutput, debug_log


@pytest.fixture
def tee(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    output = TeeOutput(tmp_path / "logs" / "session.log", version="1.0.0")
    yield output
    if not output.log_file.closed:
        output.close()


def log_lines(tee):
    tee.close()
    text = Path(tee.log_file.name).read_text(encoding="utf-8")
    # Drop the session header
    return [line.split(" ", 1)[1] for line in text.splitlines() if line.startswith("[")]


class TestTeeOutput:
    def test_header_written(self, tee):
        tee.close()
        text = Path(tee.log_file.name).read_text(encoding="utf-8")
        assert "Session started:" in text
        assert "v1.0.0" in text

    def test_terminal_gets_everything(self, tee):
        tee.write("\x1b[31mred\x1b[0m\n")
        assert tee.terminal.getvalue() == "\x1b[31mred\x1b[0m\n"

    def test_escape_codes_stripped(self, tee):
        tee.write("\x1b[31mred\x1b[0m \x1b[2;4Hmoved\n")
        assert log_lines(tee) == ["red moved"]

    def test_partial_lines_joined(self, tee):
        tee.write("hel")
        tee.write("lo\n")
        assert log_lines(tee) == ["hello"]

    def test_carriage_return_keeps_last_rewrite(self, tee):
        tee.write("\r 10%\r 50%\rdone\n")
        assert log_lines(tee) == ["done"]

    @pytest.mark.parametrize("noise", [
        "┌────┐\n",
        "\r⣾⣿ Working\n",
        "> Apple\n",
        "  [x] Banana\n",
        "Enter=Confirm  Esc=Cancel  Q=Quit\n",
        "   \n",
    ])
    def test_ui_noise_skipped(self, tee, noise):
        tee.write(noise)
        assert log_lines(tee) == []

    def test_unterminated_line_flushed_on_close(self, tee):
        tee.write("last words")
        assert log_lines(tee) == ["last words"]

    def test_log_only(self, tee):
        tee.log_only("hidden")
        assert tee.terminal.getvalue() == ""
        assert log_lines(tee) == ["hidden"]


class TestDebugLog:
    def test_goes_to_tee(self, tee, monkeypatch):
        monkeypatch.setattr(sys, "stdout", tee)
        debug_log("probe: 80x24")
        assert log_lines(tee) == ["probe: 80x24"]

    def test_ignored_without_tee(self, capsys):
        debug_log("nobody listening")
        assert capsys.readouterr().out == ""
