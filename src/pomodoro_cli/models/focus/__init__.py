"""Focus mode - Pomodoro session sequencing for Pomodoro CLI."""

from .clock import SessionClock
from .keyboard import InputRouter, KeyboardHandler, get_keyboard_handler
from .plan import Phase, PhaseKind, PomodoroConfig, build_phase_plan
from .sequencer import RenderPayload, SessionSequencer, format_duration
from .state import Command, SessionState, SessionStatus
from .ui import SessionDisplay, show_completion_message, show_exit_message

__all__ = [
    "Command",
    "InputRouter",
    "KeyboardHandler",
    "Phase",
    "PhaseKind",
    "PomodoroConfig",
    "RenderPayload",
    "SessionClock",
    "SessionDisplay",
    "SessionSequencer",
    "SessionState",
    "SessionStatus",
    "build_phase_plan",
    "format_duration",
    "get_keyboard_handler",
    "show_completion_message",
    "show_exit_message",
]
