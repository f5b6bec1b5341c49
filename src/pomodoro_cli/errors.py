"""Custom exceptions for Pomodoro CLI."""

from pomodoro_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_TERMINAL,
)


class PomodoroError(Exception):
    """Base exception for all Pomodoro CLI errors."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigurationError(PomodoroError, ValueError):
    """Raised when durations, rounds or the config file are invalid."""

    exit_code = ERROR_INVALID_ARGS


class TerminalError(PomodoroError):
    """Raised when stdin is not an interactive terminal."""

    exit_code = ERROR_TERMINAL
