"""Tests for pomodoro_cli.utils.exit_codes."""

from __future__ import annotations

from pomodoro_cli.errors import ConfigurationError, PomodoroError, TerminalError
from pomodoro_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_TERMINAL,
    SUCCESS,
)


def test_constant_values():
    assert (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_TERMINAL) == (0, 1, 2, 3)


def test_errors_carry_exit_codes():
    assert PomodoroError("x").exit_code == ERROR_GENERAL
    assert ConfigurationError("x").exit_code == ERROR_INVALID_ARGS
    assert TerminalError("x").exit_code == ERROR_TERMINAL


def test_explicit_exit_code_overrides_class_default():
    assert PomodoroError("x", exit_code=ERROR_TERMINAL).exit_code == ERROR_TERMINAL
