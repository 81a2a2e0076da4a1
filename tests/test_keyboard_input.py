"""Tests for key decoding."""

import pytest

from tinytui.ui.primitives import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_TAB,
    KEY_UP,
    decode_key,
)


class TestDecodeKey:
    @pytest.mark.parametrize("extra,key", [
        ("[A", KEY_UP),
        ("[B", KEY_DOWN),
        ("[C", KEY_RIGHT),
        ("[D", KEY_LEFT),
        ("OA", KEY_UP),
        ("OB", KEY_DOWN),
    ])
    def test_arrow_sequences(self, extra, key):
        assert decode_key("\x1b", extra) == key

    def test_unknown_sequence_ignored(self):
        assert decode_key("\x1b", "[15~") == ""

    def test_lone_escape(self):
        assert decode_key("\x1b") == KEY_ESC
        assert decode_key("\x1b", return_special_keys=False) == "\x1b"

    def test_arrows_raw_mode(self):
        assert decode_key("\x1b", "[A", return_special_keys=False) == ""

    @pytest.mark.parametrize("ch,key", [
        ("\r", KEY_ENTER),
        ("\n", KEY_ENTER),
        (" ", KEY_SPACE),
        ("\t", KEY_TAB),
        ("\x7f", KEY_BACKSPACE),
        ("\x08", KEY_BACKSPACE),
    ])
    def test_special_chars(self, ch, key):
        assert decode_key(ch) == key
        assert decode_key(ch, return_special_keys=False) == ch

    @pytest.mark.parametrize("ch", ["q", "Q", "a", "1"])
    def test_plain_chars(self, ch):
        assert decode_key(ch) == ch
