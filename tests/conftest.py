"""Pytest configuration and shared fixtures."""

import io
from dataclasses import dataclass, field

import pytest

from tinytui.ui.primitives import terminal


@pytest.fixture(autouse=True)
def reset_terminal_state():
    """Each test starts with a visible cursor and default foreground."""
    state = terminal.get_state()
    state.cursor_visible = True
    state.foreground = None
    state.bright_foreground = False
    yield state


@pytest.fixture
def term():
    """A fake terminal: everything written lands in a StringIO."""
    return io.StringIO()


@dataclass
class ScriptedKeys:
    """Key source that replays a fixed list of keys, then fails loudly."""
    keys: list
    calls: list = field(default_factory=list)

    def __call__(self, *args):
        self.calls.append(args)
        if not self.keys:
            raise IndexError("key script exhausted")
        return self.keys.pop(0)


@pytest.fixture
def scripted_keys():
    def make(*keys):
        return ScriptedKeys(list(keys))
    return make


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Isolated TINYTUI_HOME."""
    monkeypatch.setenv("TINYTUI_HOME", str(tmp_path))
    return tmp_path
