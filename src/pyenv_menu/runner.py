"""Run pyenv subcommands through a shell that has pyenv's init hook loaded."""

import os
import shlex
import subprocess
from dataclasses import dataclass, field

from pyenv_menu.config import DEFAULT_SHELL, HOMEBREW_CANDIDATES, Settings
from pyenv_menu.errors import ExecutionError
from pyenv_menu.utils import log


def build_init_lines(tool: str, brew: str = "") -> list[str]:
    """Return the shell lines that put *tool* on PATH with its hooks active.

    Pure function: the Homebrew shellenv line is only emitted when a brew
    binary was found.
    """
    lines = []
    if brew:
        lines.append(f'eval "$({shlex.quote(brew)} shellenv)"')
    lines.append(f'eval "$({shlex.quote(tool)} init -)"')
    return lines


def build_script(init_lines: list[str], tool: str, args: tuple[str, ...]) -> str:
    """Generate the shell script for one tool invocation.

    Pure function: init lines first, then the quoted command line.
    """
    command = " ".join(shlex.quote(part) for part in (tool, *args))
    return "\n".join([*init_lines, command]) + "\n"


def _find_homebrew() -> str:
    """Return the first Homebrew binary that exists, or an empty string."""
    for candidate in HOMEBREW_CANDIDATES:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return ""


@dataclass(frozen=True)
class ShellEnvironment:
    """How every pyenv invocation is wrapped: shell, init preamble, env vars."""

    shell: str
    tool: str
    init_lines: tuple[str, ...]
    env: dict = field(default_factory=dict, compare=False)

    @classmethod
    def prepare(cls, settings: Settings) -> "ShellEnvironment":
        """Resolve the shell environment once for the session.

        HOME is passed through explicitly; pyenv locates its root from it.
        """
        env = os.environ.copy()
        env["HOME"] = os.path.expanduser("~")
        init_lines = build_init_lines(settings.tool, _find_homebrew())
        return cls(
            shell=settings.shell or DEFAULT_SHELL,
            tool=settings.tool,
            init_lines=tuple(init_lines),
            env=env,
        )


class CommandRunner:
    """Execute ``<tool> <args...>`` and return its trimmed stdout."""

    def __init__(self, environment: ShellEnvironment):
        self.environment = environment

    def describe(self, *args: str) -> str:
        return shlex.join((self.environment.tool, *args))

    def run(self, *args: str) -> str:
        """Run one tool subcommand. Raises ExecutionError on failure.

        The init preamble is sourced before every call. There is no timeout:
        a hung tool blocks the caller until it exits.
        """
        command = self.describe(*args)
        script = build_script(list(self.environment.init_lines), self.environment.tool, args)
        try:
            result = subprocess.run(
                [self.environment.shell, "-c", script],
                capture_output=True,
                text=True,
                env=self.environment.env,
            )
        except OSError as exc:
            log(f"{command} could not start: {exc}")
            raise ExecutionError(command, str(exc)) from exc

        log(f"{command} (exit {result.returncode})")
        if result.returncode != 0:
            message = (result.stderr or result.stdout or "").strip()
            raise ExecutionError(command, message or "no output", result.returncode)
        return result.stdout.rstrip()
