"""Configuration constants for the pyenv menu.

Everything the menu needs to know about the external tool lives here: the
subcommands it runs, the markers it strips from their output, and the
labels it shows. Environment variables override the defaults at startup.
"""

import os
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# External tool
# ---------------------------------------------------------------------------

DEFAULT_TOOL = "pyenv"
DEFAULT_SHELL = "/bin/sh"

INSTALL_GUIDE_URL = "https://github.com/pyenv/pyenv#installation"

# Homebrew installs pyenv outside the default PATH on macOS; its shellenv
# hook has to run before `pyenv init`.
HOMEBREW_CANDIDATES = ("/opt/homebrew/bin/brew", "/usr/local/bin/brew")

SUBCOMMANDS = {
    "probe": ("--version",),
    "current": ("version",),
    "installed": ("versions",),
    "installable": ("install", "--list"),
    "switch": ("global",),
    "install": ("install",),
    "uninstall": ("uninstall", "-f"),
}

# ---------------------------------------------------------------------------
# Output markers
# ---------------------------------------------------------------------------

ACTIVE_MARKER = "*"
SYSTEM_VERSION = "system"

# ---------------------------------------------------------------------------
# User-facing text
# ---------------------------------------------------------------------------

LABELS = {
    "nav_title": "Python Version Manager",
    "search_placeholder": "Search Python versions...",
    "select": "Select",
    "back": "Back",
    "current_title": "Current Python version",
    "switch_action": "Switch to this version",
    "install_action": "Install this version",
    "uninstall_action": "Uninstall this version",
    "active_hint": "active",
    "error_title": "Error",
    "error_subtitle": "pyenv is not installed or configured correctly",
    "guide_action": "Open pyenv installation guide",
    "unavailable": "pyenv is unavailable",
    "load_failed": "Failed to load version list",
    "action_failed": "Action failed",
    "switched": "Switched to {name}",
    "installing": "Installing {name}...",
    "installed": "Installed {name}",
    "uninstalled": "Uninstalled {name}",
    "loading": "Loading versions...",
    "empty": "No versions found",
}


def _default_log_dir() -> str:
    return os.path.join(os.path.expanduser("~"), ".cache", "pyenv-menu", "logs")


@dataclass
class Settings:
    """Runtime settings, resolved once per session."""

    tool: str = DEFAULT_TOOL
    shell: str = DEFAULT_SHELL
    log_dir: str = field(default_factory=_default_log_dir)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from PYENV_MENU_* environment variables.

        The init preamble is POSIX shell syntax, so the login $SHELL is
        ignored and the shell defaults to /bin/sh.
        """
        return cls(
            tool=os.environ.get("PYENV_MENU_TOOL", "") or DEFAULT_TOOL,
            shell=os.environ.get("PYENV_MENU_SHELL", "") or DEFAULT_SHELL,
            log_dir=os.environ.get("PYENV_MENU_LOG_DIR", "") or _default_log_dir(),
        )
