"""Shared fakes: a scripted pyenv runner and a notifier that records toasts."""

import pytest

from pyenv_menu.errors import ExecutionError


class FakeRunner:
    """Answers pyenv subcommands from a dict of canned outputs.

    A value that is an Exception instance is raised instead of returned.
    Unknown commands fail the way a missing pyenv would.
    """

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.calls = []

    def run(self, *args):
        self.calls.append(args)
        key = " ".join(args)
        if key not in self.outputs:
            raise ExecutionError(f"pyenv {key}", "unknown command", 127)
        result = self.outputs[key]
        if isinstance(result, Exception):
            raise result
        return result


class RecordingNotifier:
    def __init__(self):
        self.events = []

    def success(self, title, message=""):
        self.events.append(("success", title, message))

    def animated(self, title, message=""):
        self.events.append(("animated", title, message))

    def failure(self, title, message=""):
        self.events.append(("failure", title, message))

    def banner(self, title, message, url):
        self.events.append(("banner", title, url))

    def styles(self):
        return [event[0] for event in self.events]


PYENV_OUTPUTS = {
    "--version": "pyenv 2.3.36",
    "version": "3.11.4 (set by /home/dev/.pyenv/version)",
    "versions": "  system\n* 3.11.4 (set by /home/dev/.pyenv/version)\n  3.9.6\n",
    "install --list": "Available versions:\n  2.7.18\n  3.9.6\n  3.12.1\n  pypy3.10-7.3.13\n",
    "global 3.9.6": "",
    "install 3.12.1": "Downloading Python-3.12.1.tar.xz...\nInstalled Python-3.12.1",
    "uninstall -f 3.9.6": "pyenv: remove /home/dev/.pyenv/versions/3.9.6",
}


@pytest.fixture
def runner():
    return FakeRunner(PYENV_OUTPUTS)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path, monkeypatch):
    """Keep session logs out of the real home directory."""
    from pyenv_menu.utils import set_log_dir

    log_dir = tmp_path / "logs"
    monkeypatch.setenv("PYENV_MENU_LOG_DIR", str(log_dir))
    set_log_dir(str(log_dir))
    yield log_dir
    set_log_dir("")
