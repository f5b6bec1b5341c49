"""Keyboard input for session controls."""

import sys

from pomodoro_cli.errors import TerminalError

from .state import Command, SessionStatus

CTRL_C = "\x03"


class InputRouter:
    """Maps single key presses to sequencer commands."""

    PAUSE_KEY = "p"
    SKIP_KEY = "s"
    QUIT_KEYS = (CTRL_C,)

    def route(self, key: str | None, status: SessionStatus) -> Command | None:
        """
        Translate *key* into a command for a session in *status*.

        ``p`` pauses an ongoing session and resumes a paused one, ``s`` skips
        the current phase until the session is complete, and Ctrl-C always
        quits. Keys are matched exactly; anything else returns None.
        """
        if not key:
            return None
        if key in self.QUIT_KEYS:
            return Command.QUIT

        if key == self.PAUSE_KEY:
            if status is SessionStatus.ONGOING:
                return Command.PAUSE
            if status is SessionStatus.PAUSED:
                return Command.RESUME
            return None

        if key == self.SKIP_KEY and status is not SessionStatus.COMPLETE:
            return Command.SKIP

        return None


class KeyboardHandler:
    """Non-blocking keyboard input handler (POSIX terminals)."""

    def __init__(self):
        if not sys.stdin.isatty():
            raise TerminalError("stdin is not an interactive terminal")
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode so keys arrive one at a time."""
        import termios
        import tty

        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            raise TerminalError(f"cannot read keys from this terminal: {e}") from e

    def get_key(self, timeout: float = 0.0) -> str | None:
        """
        Get a single keypress, waiting at most *timeout* seconds.

        Returns the key character or None if no key was pressed.
        """
        import select

        if select.select([sys.stdin], [], [], timeout)[0]:
            return sys.stdin.read(1)
        return None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            import termios

            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    def __init__(self):
        import msvcrt

        if not sys.stdin.isatty():
            raise TerminalError("stdin is not an interactive terminal")
        self.msvcrt = msvcrt

    def get_key(self, timeout: float = 0.0) -> str | None:
        """Get key on Windows, polling until *timeout* elapses."""
        import time

        deadline = time.monotonic() + timeout
        while True:
            if self.msvcrt.kbhit():
                key = self.msvcrt.getwch()
                return key
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.02)

    def stop(self):
        """No cleanup needed on Windows."""
        pass


def get_keyboard_handler():
    """Create the keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
