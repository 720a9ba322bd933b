"""Terminal presentation: rows, notifications, and the interactive loop."""

import webbrowser
from dataclasses import dataclass

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from pyenv_menu.config import INSTALL_GUIDE_URL, LABELS
from pyenv_menu.controller import ViewController
from pyenv_menu.errors import PyenvMenuError
from pyenv_menu.state import MAIN_MENU, Mode, ViewState
from pyenv_menu.utils import console as default_console
from pyenv_menu.utils import log

_ACTION_LABELS = {
    Mode.SWITCH: LABELS["switch_action"],
    Mode.INSTALL: LABELS["install_action"],
    Mode.UNINSTALL: LABELS["uninstall_action"],
}


@dataclass(frozen=True)
class RowAction:
    label: str
    kind: str  # "select", "perform", "back" or "open_url"
    target: str = ""


@dataclass(frozen=True)
class Row:
    title: str
    subtitle: str
    actions: tuple[RowAction, ...]

    @property
    def primary(self) -> RowAction:
        return self.actions[0]


BACK = RowAction(LABELS["back"], "back")


def matches_query(name: str, query: str) -> bool:
    return not query or query.lower() in name.lower()


def build_rows(state: ViewState) -> list[Row]:
    """Map a view state to the rows the user can pick from.

    Pure function: no I/O, same state always gives the same rows.
    """
    if not state.available:
        return [
            Row(
                LABELS["error_title"],
                LABELS["error_subtitle"],
                (RowAction(LABELS["guide_action"], "open_url", INSTALL_GUIDE_URL),),
            )
        ]

    if state.mode == Mode.ROOT:
        return [
            Row(item.title, item.subtitle, (RowAction(LABELS["select"], "select", item.mode.value),))
            for item in MAIN_MENU
        ]

    entries = [e for e in state.entries if matches_query(e.name, state.query)]

    if state.mode == Mode.CURRENT:
        return [Row(LABELS["current_title"], e.name, (BACK,)) for e in entries]

    action = _ACTION_LABELS[state.mode]
    return [
        Row(
            e.name,
            LABELS["active_hint"] if e.is_current else "",
            (RowAction(action, "perform", e.name), BACK),
        )
        for e in entries
    ]


def parse_input(text: str, row_count: int) -> tuple[str, str]:
    """Interpret one line of user input.

    Pure function. Returns (kind, value) where kind is one of 'quit', 'back',
    'search', 'pick' (value is the zero-based row index) or 'invalid'.
    """
    text = text.strip()
    if text.lower() in ("q", "quit", "exit"):
        return "quit", ""
    if text.lower() in ("b", "back"):
        return "back", ""
    if text.startswith("/"):
        return "search", text[1:].strip()
    if text.isdigit():
        index = int(text) - 1
        if 0 <= index < row_count:
            return "pick", str(index)
    return "invalid", text


class ConsoleNotifier:
    """Toast-style notifications printed to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def success(self, title: str, message: str = "") -> None:
        self._print("✔", title, message, "green")

    def animated(self, title: str, message: str = "") -> None:
        self._print("…", title, message, "cyan")

    def failure(self, title: str, message: str = "") -> None:
        self._print("✘", title, message, "bold red")

    def banner(self, title: str, message: str, url: str) -> None:
        body = f"{message}\n\nSee {url}" if message else f"See {url}"
        self.console.print(Panel(body, title=title, border_style="red"))

    def _print(self, icon: str, title: str, message: str, style: str) -> None:
        self.console.print(f"{icon} {title}", style=style)
        if message:
            self.console.print(f"  {message}", style="dim")


class MenuApp:
    """Interactive loop: render rows, read a choice, hand it to the controller."""

    def __init__(self, controller: ViewController, console: Console | None = None, open_url=None):
        self.controller = controller
        self.console = console or default_console
        self.open_url = open_url or webbrowser.open
        self._status = None
        controller.subscribe(self._on_state)

    def _on_state(self, state: ViewState) -> None:
        if state.loading and self._status is None:
            self._status = self.console.status(LABELS["loading"])
            self._status.start()
        elif not state.loading and self._status is not None:
            self._status.stop()
            self._status = None

    def render(self, rows: list[Row]) -> None:
        state = self.controller.state
        title = LABELS["nav_title"]
        if self.controller.tool_version:
            title = f"{title} (pyenv {self.controller.tool_version})"
        if state.mode != Mode.ROOT:
            title = f"{title} › {state.mode.value}"
        table = Table(title=title, title_justify="left", expand=False)
        table.add_column("#", justify="right", style="bold cyan")
        table.add_column("Title")
        table.add_column("Subtitle", style="dim")
        table.add_column("Action", style="magenta")
        for number, row in enumerate(rows, start=1):
            table.add_row(str(number), row.title, row.subtitle, row.primary.label)
        self.console.print()
        self.console.print(table)
        if not rows:
            self.console.print(LABELS["empty"], style="yellow")
        if state.query:
            self.console.print(f"Filter: {state.query}", style="dim")

    def _hint(self) -> str:
        state = self.controller.state
        parts = ["number to choose"]
        if state.available and state.mode != Mode.ROOT:
            parts.append("b back")
            parts.append(f"/text {LABELS['search_placeholder'].lower()}")
        parts.append("q quit")
        return " · ".join(parts)

    def dispatch(self, action: RowAction) -> None:
        """Run one row action."""
        if action.kind == "select":
            self.controller.select_mode(Mode(action.target))
        elif action.kind == "perform":
            self.controller.perform(action.target)
        elif action.kind == "back":
            self.controller.back()
        elif action.kind == "open_url":
            log(f"Opening {action.target}")
            self.open_url(action.target)

    def handle(self, text: str, rows: list[Row]) -> bool:
        """Apply one line of input. Returns False when the user wants to quit."""
        kind, value = parse_input(text, len(rows))
        state = self.controller.state
        if kind == "quit":
            return False
        if kind == "back":
            if state.mode != Mode.ROOT:
                self.controller.back()
        elif kind == "search":
            if state.available and state.mode != Mode.ROOT:
                self.controller.set_query(value)
        elif kind == "pick":
            self.dispatch(rows[int(value)].primary)
        else:
            self.console.print(f"Unknown choice: {value!r}", style="yellow")
        return True

    def run(self) -> None:
        """Probe pyenv, then loop until the user quits."""
        with self.console.status(LABELS["loading"]):
            self.controller.probe()
        while True:
            rows = build_rows(self.controller.state)
            self.render(rows)
            try:
                text = Prompt.ask(self._hint(), console=self.console, default="", show_default=False)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return
            try:
                if not self.handle(text, rows):
                    return
            except PyenvMenuError as exc:
                self.console.print(str(exc), style="red")
