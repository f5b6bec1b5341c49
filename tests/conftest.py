"""Shared test fixtures and configuration.

Keeps log and config files inside each test's tmp_path.
"""

from __future__ import annotations

import logging

import pytest


class FakeTime:
    """Callable time source advanced by hand."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _clear_app_logger() -> None:
    app_logger = logging.getLogger("pomodoro_cli")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Redirect platformdirs lookups and reset module singletons."""
    import pomodoro_cli.config as config_mod
    import pomodoro_cli.utils.logger as logger_mod

    monkeypatch.setattr(
        logger_mod, "user_log_dir", lambda *args, **kwargs: str(tmp_path / "logs")
    )
    monkeypatch.setattr(
        config_mod, "user_config_dir", lambda *args, **kwargs: str(tmp_path / "config")
    )
    monkeypatch.setattr(logger_mod, "_logger", None)
    monkeypatch.setattr(logger_mod, "_debug_handler", None)
    monkeypatch.setattr(config_mod, "_config_manager", None)
    _clear_app_logger()

    yield tmp_path

    _clear_app_logger()


@pytest.fixture()
def fake_time() -> FakeTime:
    return FakeTime()
