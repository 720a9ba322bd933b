"""Non-interactive commands: print a version list or run one action and exit."""

from typing import Annotated

import typer

from pyenv_menu.config import Settings
from pyenv_menu.controller import ViewController
from pyenv_menu.presentation import ConsoleNotifier, matches_query
from pyenv_menu.runner import CommandRunner, ShellEnvironment
from pyenv_menu.state import Mode
from pyenv_menu.utils import console


def make_runner(settings: Settings) -> CommandRunner:
    """Prepare the shell environment once and wrap it in a runner."""
    return CommandRunner(ShellEnvironment.prepare(settings))


def build_controller(settings: Settings) -> ViewController:
    return ViewController(make_runner(settings), ConsoleNotifier(console))


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings.from_env()


def _open(ctx: typer.Context, mode: Mode, load: bool = True) -> ViewController:
    """Probe the tool and enter *mode*. Exits with code 1 if either step fails."""
    controller = build_controller(_settings(ctx))
    if not controller.probe():
        raise typer.Exit(code=1)
    if not controller.select_mode(mode, load=load):
        raise typer.Exit(code=1)
    return controller


def _print_entries(controller: ViewController, query: str = "") -> None:
    entries = [e for e in controller.state.entries if matches_query(e.name, query)]
    if not entries:
        console.print("No versions found", style="yellow")
        return
    for entry in entries:
        if entry.is_current:
            console.print(f"* {entry.name}", style="bold green")
        else:
            console.print(f"  {entry.name}")


def _run_action(ctx: typer.Context, mode: Mode, name: str) -> None:
    """Run one action; the only list-load is the reload after it succeeds."""
    controller = _open(ctx, mode, load=False)
    if not controller.perform(name):
        raise typer.Exit(code=1)


def register(app: typer.Typer) -> None:
    """Register the non-interactive commands on the shared app."""
    app.command()(current)
    app.command()(versions)
    app.command()(available)
    app.command()(use)
    app.command()(install)
    app.command()(uninstall)


def current(ctx: typer.Context) -> None:
    """Show the active Python version."""
    controller = _open(ctx, Mode.CURRENT)
    _print_entries(controller)


def versions(ctx: typer.Context) -> None:
    """List installed Python versions; the active one is starred."""
    controller = _open(ctx, Mode.SWITCH)
    _print_entries(controller)


def available(
    ctx: typer.Context,
    match: Annotated[str, typer.Option("--filter", "-f", help="Only show versions containing this text")] = "",
) -> None:
    """List Python versions pyenv can install."""
    controller = _open(ctx, Mode.INSTALL)
    _print_entries(controller, match)


def use(ctx: typer.Context, name: Annotated[str, typer.Argument(help="Installed version to activate")]) -> None:
    """Set the global Python version."""
    _run_action(ctx, Mode.SWITCH, name)


def install(ctx: typer.Context, name: Annotated[str, typer.Argument(help="Version to install")]) -> None:
    """Install a Python version. This can take several minutes."""
    _run_action(ctx, Mode.INSTALL, name)


def uninstall(ctx: typer.Context, name: Annotated[str, typer.Argument(help="Installed version to remove")]) -> None:
    """Uninstall a Python version without asking for confirmation."""
    _run_action(ctx, Mode.UNINSTALL, name)
