"""Console utilities for Pomodoro CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, stderr: bool = False) -> Console:
    """Get a shared Rich Console; ``stderr=True`` for error output."""
    return Console(highlight=highlight, stderr=stderr)


def get_error_console() -> Console:
    """Console for error and warning messages."""
    return get_console(highlight=False, stderr=True)
