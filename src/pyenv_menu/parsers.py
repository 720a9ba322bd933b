"""Parsers for pyenv's line-oriented output.

One parser per subcommand. Each is total over strings: unexpected shapes
produce fewer entries, never an exception. The filtering rules are small
named steps so each can be tested on its own.
"""

from pyenv_menu.config import ACTIVE_MARKER, SYSTEM_VERSION
from pyenv_menu.state import VersionEntry


def split_lines(text: str) -> list[str]:
    return text.splitlines()


def drop_header(lines: list[str]) -> list[str]:
    """Discard the first line whatever it contains."""
    return lines[1:]


def drop_blank(names: list[str]) -> list[str]:
    return [name for name in names if name.strip()]


def drop_system(names: list[str]) -> list[str]:
    """Remove the 'system' pseudo-version, which pyenv cannot install or remove."""
    return [name for name in names if name.strip() != SYSTEM_VERSION]


def first_token(text: str) -> str:
    """Return the first whitespace-delimited token, or '' for blank text."""
    parts = text.split()
    return parts[0] if parts else ""


def strip_active_marker(line: str) -> tuple[str, bool]:
    """Split a `pyenv versions` line into (name, is_active).

    The active version is prefixed with '* ' and suffixed with an annotation
    like '(set by /root/.pyenv/version)'; virtualenv links carry
    '--> /path'. Only the version name is kept.

        >>> strip_active_marker("* 3.11.4 (set by /root/.pyenv/version)")
        ('3.11.4', True)
    """
    stripped = line.strip()
    is_active = stripped.startswith(ACTIVE_MARKER)
    if is_active:
        stripped = stripped[len(ACTIVE_MARKER):]
    return first_token(stripped), is_active


def parse_current(text: str) -> list[VersionEntry]:
    """Parse `pyenv version`: '3.11.4 (set by ...)' -> [3.11.4 (current)]."""
    name = first_token(text)
    if not name:
        return []
    return [VersionEntry(name, is_current=True)]


def parse_installed(text: str) -> list[VersionEntry]:
    """Parse `pyenv versions` into entries, in the order pyenv printed them."""
    entries = []
    for line in drop_blank(split_lines(text)):
        name, is_active = strip_active_marker(line)
        if not drop_blank(drop_system([name])):
            continue
        entries.append(VersionEntry(name, is_current=is_active))
    return entries


def parse_installable(text: str) -> list[VersionEntry]:
    """Parse `pyenv install --list`, whose first line is an 'Available versions:' header."""
    names = [line.strip() for line in drop_header(split_lines(text))]
    return [VersionEntry(name) for name in drop_system(drop_blank(names))]


def parse_tool_version(text: str) -> str:
    """Parse `pyenv --version`: 'pyenv 2.3.36' -> '2.3.36'.

    Falls back to the whole first token when there is no second one.
    """
    parts = text.split()
    if len(parts) >= 2:
        return parts[1]
    return parts[0] if parts else ""
