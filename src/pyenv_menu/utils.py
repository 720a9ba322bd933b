"""Core utility functions: console output and logging."""

import os
from datetime import datetime

from rich.console import Console

console = Console()

LOG_FILE_NAME = "pyenv-menu.log"

_log_dir = ""


def set_log_dir(path: str) -> None:
    """Point the session log at *path*. An empty path disables file logging."""
    global _log_dir
    _log_dir = path


def resolve_log_file() -> str:
    """Return the log file path, creating its directory if needed. Empty when disabled."""
    if not _log_dir:
        return ""
    os.makedirs(_log_dir, exist_ok=True)
    return os.path.join(_log_dir, LOG_FILE_NAME)


def format_log_line(message: str, now: datetime | None = None) -> str:
    """Prefix a message with a timestamp.

    Pure function: e.g. '[2026-02-13 10:00:00] pyenv versions (exit 0)'.
    """
    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    return f"[{stamp}] {message}"


def log(message: str, style: str = "", echo: bool = False) -> None:
    """Append a message to the session log, optionally echoing it to the console."""
    if echo:
        if style:
            console.print(message, style=style)
        else:
            console.print(message)

    try:
        log_file = resolve_log_file()
        if log_file:
            with open(log_file, "a", encoding="utf-8") as f:
                f.write(format_log_line(message) + "\n")
    except Exception:
        pass  # Never break the menu over logging
