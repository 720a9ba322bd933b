"""Immutable view state: the selected mode and the versions loaded for it."""

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    ROOT = "root"
    CURRENT = "current"
    SWITCH = "switch"
    INSTALL = "install"
    UNINSTALL = "uninstall"


# Modes whose rows carry an action that changes pyenv state.
ACTION_MODES = {Mode.SWITCH, Mode.INSTALL, Mode.UNINSTALL}


@dataclass(frozen=True)
class VersionEntry:
    name: str
    is_current: bool = False


@dataclass(frozen=True)
class MenuItem:
    mode: Mode
    title: str
    subtitle: str


MAIN_MENU = (
    MenuItem(Mode.CURRENT, "Show current Python version", "Display the active Python version"),
    MenuItem(Mode.SWITCH, "Switch Python version", "Switch to another installed Python version"),
    MenuItem(Mode.INSTALL, "Install Python version", "Install a new Python version"),
    MenuItem(Mode.UNINSTALL, "Uninstall Python version", "Remove an installed Python version"),
)


@dataclass(frozen=True)
class ViewState:
    """Everything the menu shows, replaced wholesale on every transition."""

    mode: Mode = Mode.ROOT
    entries: tuple[VersionEntry, ...] = ()
    available: bool = True
    loading: bool = False
    query: str = ""
