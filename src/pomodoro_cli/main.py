"""Main entry point for Pomodoro CLI."""

from typing import Optional

import typer

from pomodoro_cli import __version__
from pomodoro_cli.commands.decorators import command_wrapper
from pomodoro_cli.commands.session_command import RESULT_COMPLETED, run_session
from pomodoro_cli.config import get_config_manager
from pomodoro_cli.models.focus.ui import show_completion_message, show_exit_message
from pomodoro_cli.utils.logger import enable_debug_output, get_logger
from pomodoro_cli.utils.ui.console import get_console
from pomodoro_cli.utils.ui.formatters import format_debug, format_warning

app = typer.Typer(
    name="pomodoro",
    help="A terminal Pomodoro timer with live progress bars",
    add_completion=False,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
@command_wrapper
def start(
    focus: Optional[int] = typer.Option(
        None, "--focus", "-f", help="Focus phase minutes", show_default="25"
    ),
    short_break: Optional[int] = typer.Option(
        None, "--short-break", "-s", help="Short Break phase minutes", show_default="5"
    ),
    long_break: Optional[int] = typer.Option(
        None, "--long-break", "-l", help="Long Break phase minutes", show_default="15"
    ),
    rounds: Optional[int] = typer.Option(
        None, "--rounds", "-r", help="How many Focus rounds", show_default="4"
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Print parsed arguments before starting"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Run a Pomodoro session: p = pause/resume, s = skip, Ctrl-C = quit."""
    parsed = {
        "focus": focus,
        "short_break": short_break,
        "long_break": long_break,
        "rounds": rounds,
        "debug": debug,
    }
    if debug:
        enable_debug_output()
        format_debug("Parsed arguments:", parsed)

    config_manager = get_config_manager()
    session_config = config_manager.resolve_session(
        focus=focus, short_break=short_break, long_break=long_break, rounds=rounds
    )
    if debug:
        format_debug("Session settings:", session_config.model_dump())
        get_logger().debug("parsed arguments: %s", parsed)

    if session_config.rounds == 1:
        format_warning("a single round runs only the long break")

    result = run_session(session_config, ui=config_manager.config.ui, console=console)

    if result == RESULT_COMPLETED:
        show_completion_message(session_config.rounds, console)
    else:
        show_exit_message(console)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
