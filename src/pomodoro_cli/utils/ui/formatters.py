"""Message formatting helpers."""

from .console import get_console, get_error_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_error_console().print(f"[bold red]Error:[/bold red] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_error_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_debug(title: str, value: object) -> None:
    """Display a value under an underlined debug title."""
    get_console().print(f"[bold red underline]{title}[/bold red underline]", value)
