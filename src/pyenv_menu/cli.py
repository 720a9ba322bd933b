"""CLI app definition and command registration."""

from typing import Annotated

import typer

from pyenv_menu import commands as _commands_mod
from pyenv_menu.config import Settings
from pyenv_menu.presentation import MenuApp
from pyenv_menu.utils import console, log, set_log_dir
from pyenv_menu.version import get_version


def _version_callback(value: bool):
    if value:
        console.print(get_version())
        raise typer.Exit()


app = typer.Typer(
    help="Browse, switch, install and uninstall Python versions managed by pyenv.",
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    tool: Annotated[
        str, typer.Option(help="Version manager executable (default: $PYENV_MENU_TOOL or pyenv).")
    ] = "",
    shell: Annotated[
        str, typer.Option(help="Shell used to load the tool's init hook (default: $PYENV_MENU_SHELL or $SHELL).")
    ] = "",
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Interactive pyenv version menu. Runs the menu when no command is given."""
    settings = Settings.from_env()
    if tool:
        settings.tool = tool
    if shell:
        settings.shell = shell
    set_log_dir(settings.log_dir)
    log(f"Session start: tool={settings.tool} shell={settings.shell}")
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        MenuApp(_commands_mod.build_controller(settings), console).run()


# Register commands from submodules
_commands_mod.register(app)
