"""Unit tests for InputRouter and the keyboard handlers.

All terminal / OS-level calls are mocked so tests run in any CI environment
without requiring a real TTY or Windows.
"""

from __future__ import annotations

import sys
import termios
from unittest.mock import MagicMock

import pytest

from pomodoro_cli.errors import TerminalError
from pomodoro_cli.models.focus.keyboard import (
    CTRL_C,
    InputRouter,
    KeyboardHandler,
    WindowsKeyboardHandler,
    get_keyboard_handler,
)
from pomodoro_cli.models.focus.state import Command, SessionStatus


def _make_keyboard_handler(mocker, old_settings=None):
    """Create a KeyboardHandler with all terminal calls patched."""
    mocker.patch("sys.stdin.isatty", return_value=True)
    mocker.patch("sys.stdin.fileno", return_value=0)
    mocker.patch("termios.tcgetattr", return_value=old_settings or ["saved"])
    mocker.patch("tty.setcbreak")
    return KeyboardHandler()


# ---------------------------------------------------------------------------
# InputRouter
# ---------------------------------------------------------------------------


class TestInputRouter:
    router = InputRouter()

    def test_p_pauses_ongoing(self):
        assert self.router.route("p", SessionStatus.ONGOING) is Command.PAUSE

    def test_p_resumes_paused(self):
        assert self.router.route("p", SessionStatus.PAUSED) is Command.RESUME

    @pytest.mark.parametrize("key", ["P", "S", "q", "Q"])
    def test_keys_are_case_sensitive_and_q_does_nothing(self, key):
        assert self.router.route(key, SessionStatus.ONGOING) is None

    @pytest.mark.parametrize("status", [SessionStatus.SKIPPED, SessionStatus.COMPLETE])
    def test_p_is_ignored_otherwise(self, status):
        assert self.router.route("p", status) is None

    @pytest.mark.parametrize(
        "status",
        [SessionStatus.ONGOING, SessionStatus.PAUSED, SessionStatus.SKIPPED],
    )
    def test_s_skips_until_complete(self, status):
        assert self.router.route("s", status) is Command.SKIP

    def test_s_is_ignored_when_complete(self):
        assert self.router.route("s", SessionStatus.COMPLETE) is None

    @pytest.mark.parametrize("status", list(SessionStatus))
    def test_ctrl_c_always_quits(self, status):
        assert self.router.route(CTRL_C, status) is Command.QUIT

    def test_q_does_not_quit_a_paused_session(self):
        assert self.router.route("q", SessionStatus.PAUSED) is None

    @pytest.mark.parametrize("key", ["x", " ", "\n", "1", None, ""])
    def test_unrecognized_keys_are_ignored(self, key):
        assert self.router.route(key, SessionStatus.ONGOING) is None


# ---------------------------------------------------------------------------
# KeyboardHandler
# ---------------------------------------------------------------------------


class TestKeyboardHandlerSetup:
    def test_init_saves_old_settings(self, mocker):
        sentinel = ["saved_settings"]
        handler = _make_keyboard_handler(mocker, old_settings=sentinel)
        assert handler.old_settings == sentinel
        assert handler.fd == 0

    def test_setup_calls_setcbreak(self, mocker):
        mocker.patch("sys.stdin.isatty", return_value=True)
        mocker.patch("sys.stdin.fileno", return_value=0)
        mocker.patch("termios.tcgetattr", return_value=["settings"])
        mock_setcbreak = mocker.patch("tty.setcbreak")

        KeyboardHandler()

        mock_setcbreak.assert_called_once_with(0)

    def test_non_interactive_stdin_is_fatal(self, mocker):
        mocker.patch("sys.stdin.isatty", return_value=False)

        with pytest.raises(TerminalError):
            KeyboardHandler()

    def test_termios_failure_is_fatal(self, mocker):
        mocker.patch("sys.stdin.isatty", return_value=True)
        mocker.patch("sys.stdin.fileno", return_value=0)
        mocker.patch("termios.tcgetattr", side_effect=termios.error("no tty"))

        with pytest.raises(TerminalError):
            KeyboardHandler()


class TestKeyboardHandlerGetKey:
    def test_returns_key_when_input_available(self, mocker):
        handler = _make_keyboard_handler(mocker)
        mocker.patch("select.select", return_value=([sys.stdin], [], []))
        mocker.patch.object(sys.stdin, "read", return_value="p")

        assert handler.get_key() == "p"

    def test_returns_none_when_no_input(self, mocker):
        handler = _make_keyboard_handler(mocker)
        mocker.patch("select.select", return_value=([], [], []))

        assert handler.get_key() is None

    def test_waits_up_to_timeout(self, mocker):
        handler = _make_keyboard_handler(mocker)
        mock_select = mocker.patch("select.select", return_value=([], [], []))

        handler.get_key(0.4)

        assert mock_select.call_args.args[3] == 0.4


class TestKeyboardHandlerStop:
    def test_stop_restores_settings_once(self, mocker):
        mock_setattr = mocker.patch("termios.tcsetattr")
        handler = _make_keyboard_handler(mocker)

        handler.stop()
        handler.stop()

        mock_setattr.assert_called_once_with(0, termios.TCSADRAIN, ["saved"])


# ---------------------------------------------------------------------------
# Windows handler and factory
# ---------------------------------------------------------------------------


class TestWindowsKeyboardHandler:
    def _handler(self, mocker, pending):
        msvcrt = MagicMock()
        msvcrt.kbhit.side_effect = pending
        msvcrt.getwch.return_value = "s"
        mocker.patch.dict(sys.modules, {"msvcrt": msvcrt})
        mocker.patch("sys.stdin.isatty", return_value=True)
        return WindowsKeyboardHandler()

    def test_returns_pending_key(self, mocker):
        handler = self._handler(mocker, [True])
        assert handler.get_key() == "s"

    def test_returns_none_after_timeout(self, mocker):
        handler = self._handler(mocker, [False])
        assert handler.get_key(0) is None


def test_factory_picks_posix_handler(mocker):
    mocker.patch.object(sys, "platform", "linux")
    handler_cls = mocker.patch("pomodoro_cli.models.focus.keyboard.KeyboardHandler")

    assert get_keyboard_handler() is handler_cls.return_value


def test_factory_picks_windows_handler(mocker):
    mocker.patch.object(sys, "platform", "win32")
    handler_cls = mocker.patch(
        "pomodoro_cli.models.focus.keyboard.WindowsKeyboardHandler"
    )

    assert get_keyboard_handler() is handler_cls.return_value
