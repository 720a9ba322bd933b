"""Exception types raised by the pyenv menu."""


class PyenvMenuError(Exception):
    """Base class for every error the menu raises on purpose."""


class ExecutionError(PyenvMenuError):
    """A pyenv invocation exited non-zero or could not be started."""

    def __init__(self, command: str, message: str, exit_code: int | None = None):
        self.command = command
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.exit_code is None:
            return f"Command failed: {self.command}: {self.message}"
        return f"Command failed (exit {self.exit_code}): {self.command}: {self.message}"


class InvalidTransition(PyenvMenuError):
    """The controller was asked to do something its current mode does not allow."""


class ToolUnavailable(PyenvMenuError):
    """The startup probe failed, so no further pyenv calls are allowed."""
