"""View controller: owns the menu state and every call into pyenv.

The controller is the only place that talks to the runner. It holds one
ViewState and replaces it on every transition, so the presentation layer
can render from a snapshot without worrying about partial updates.
"""

from dataclasses import replace
from typing import Callable, Protocol

from pyenv_menu.config import INSTALL_GUIDE_URL, LABELS, SUBCOMMANDS
from pyenv_menu.errors import ExecutionError, InvalidTransition, ToolUnavailable
from pyenv_menu.parsers import (
    parse_current,
    parse_installable,
    parse_installed,
    parse_tool_version,
)
from pyenv_menu.state import ACTION_MODES, Mode, VersionEntry, ViewState
from pyenv_menu.utils import log


class Runner(Protocol):
    def run(self, *args: str) -> str: ...


class Notifier(Protocol):
    def success(self, title: str, message: str = "") -> None: ...

    def animated(self, title: str, message: str = "") -> None: ...

    def failure(self, title: str, message: str = "") -> None: ...

    def banner(self, title: str, message: str, url: str) -> None: ...


# mode -> (subcommand key, parser)
_LOADERS: dict[Mode, tuple[str, Callable[[str], list[VersionEntry]]]] = {
    Mode.CURRENT: ("current", parse_current),
    Mode.SWITCH: ("installed", parse_installed),
    Mode.UNINSTALL: ("installed", parse_installed),
    Mode.INSTALL: ("installable", parse_installable),
}

# mode -> (subcommand key, success label, in-progress label)
_ACTIONS: dict[Mode, tuple[str, str, str]] = {
    Mode.SWITCH: ("switch", "switched", ""),
    Mode.INSTALL: ("install", "installed", "installing"),
    Mode.UNINSTALL: ("uninstall", "uninstalled", ""),
}


class ViewController:
    def __init__(self, runner: Runner, notifier: Notifier):
        self.runner = runner
        self.notifier = notifier
        self.tool_version = ""
        self._state = ViewState()
        self._listeners: list[Callable[[ViewState], None]] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: Callable[[ViewState], None]) -> None:
        """Call *listener* with the new state after every transition."""
        self._listeners.append(listener)

    def _set(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in self._listeners:
            listener(self._state)

    # ------------------------------------------------------------------
    # Availability probe
    # ------------------------------------------------------------------

    def probe(self) -> bool:
        """Check once that pyenv answers. A failure disables pyenv calls for good."""
        try:
            output = self.runner.run(*SUBCOMMANDS["probe"])
        except ExecutionError as exc:
            log(f"Probe failed: {exc}")
            self._set(available=False, mode=Mode.ROOT, entries=(), loading=False)
            self.notifier.banner(LABELS["unavailable"], str(exc), INSTALL_GUIDE_URL)
            return False
        self.tool_version = parse_tool_version(output)
        log(f"Probe ok: {output}")
        return True

    def require_available(self) -> None:
        if not self._state.available:
            raise ToolUnavailable(LABELS["unavailable"])

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def select_mode(self, mode: Mode, load: bool = True) -> bool:
        """Enter *mode* from the root menu and load its list. Returns the load result.

        With load=False the mode is entered without listing, for callers that
        only want to run the mode's action.
        """
        self.require_available()
        if mode == Mode.ROOT:
            self.back()
            return True
        if self._state.mode != Mode.ROOT:
            raise InvalidTransition(
                f"Cannot switch from {self._state.mode.value} to {mode.value}; go back first"
            )
        log(f"Mode: {mode.value}")
        self._set(mode=mode, entries=(), query="")
        if not load:
            return True
        return self.load()

    def back(self) -> None:
        log("Mode: root")
        self._set(mode=Mode.ROOT, entries=(), query="", loading=False)

    def set_query(self, query: str) -> None:
        self._set(query=query.strip())

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Reload the list for the current mode. Returns False when the load failed.

        On failure the previous entries stay in place.
        """
        if not self._state.available or self._state.mode == Mode.ROOT:
            return False
        key, parse = _LOADERS[self._state.mode]
        self._set(loading=True)
        try:
            output = self.runner.run(*SUBCOMMANDS[key])
        except ExecutionError as exc:
            log(f"Load failed for {self._state.mode.value}: {exc}")
            self.notifier.failure(LABELS["load_failed"], str(exc))
            return False
        else:
            entries = tuple(parse(output))
            log(f"Loaded {len(entries)} entries for {self._state.mode.value}")
            self._set(entries=entries)
            return True
        finally:
            self._set(loading=False)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def perform(self, name: str) -> bool:
        """Run the current mode's action on version *name*, then reload on success."""
        self.require_available()
        mode = self._state.mode
        if mode not in ACTION_MODES:
            raise InvalidTransition(f"No action available in {mode.value} mode")

        key, done_label, progress_label = _ACTIONS[mode]
        if progress_label:
            self.notifier.animated(LABELS[progress_label].format(name=name))
        try:
            self.runner.run(*SUBCOMMANDS[key], name)
        except ExecutionError as exc:
            log(f"{mode.value} {name} failed: {exc}")
            self.notifier.failure(LABELS["action_failed"], str(exc))
            return False

        log(f"{mode.value} {name} succeeded")
        self.notifier.success(LABELS[done_label].format(name=name))
        self.load()
        return True
