"""Session state and its transitions."""

from dataclasses import dataclass, replace
from enum import Enum

from .plan import Phase


class SessionStatus(str, Enum):
    """Status of the running session."""

    ONGOING = "ongoing"
    PAUSED = "paused"
    SKIPPED = "skipped"
    COMPLETE = "complete"

    @property
    def label(self) -> str:
        """Text shown in the status bar."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    SessionStatus.ONGOING: "In Session",
    SessionStatus.PAUSED: "Paused",
    SessionStatus.SKIPPED: "Skipped",
    SessionStatus.COMPLETE: "Pomodoro Session Complete!",
}


class Command(str, Enum):
    """Commands sent from the input router to the sequencer."""

    PAUSE = "pause"
    RESUME = "resume"
    SKIP = "skip"
    QUIT = "quit"


@dataclass(frozen=True)
class SessionState:
    """Position and status of a session within its phase plan."""

    current_phase_index: int
    remaining_seconds: int
    status: SessionStatus = SessionStatus.ONGOING

    @classmethod
    def initial(cls, plan: tuple[Phase, ...]) -> "SessionState":
        """State at session start: first phase, full duration, ongoing."""
        return cls(
            current_phase_index=0,
            remaining_seconds=plan[0].duration_seconds,
            status=SessionStatus.ONGOING,
        )

    @property
    def is_complete(self) -> bool:
        return self.status is SessionStatus.COMPLETE


def advance(state: SessionState, plan: tuple[Phase, ...]) -> SessionState:
    """Move to the start of the next phase, or to COMPLETE after the last one."""
    next_index = state.current_phase_index + 1
    if next_index >= len(plan):
        return SessionState(
            current_phase_index=len(plan),
            remaining_seconds=0,
            status=SessionStatus.COMPLETE,
        )
    return SessionState(
        current_phase_index=next_index,
        remaining_seconds=plan[next_index].duration_seconds,
        status=SessionStatus.ONGOING,
    )


def tick(state: SessionState, plan: tuple[Phase, ...]) -> SessionState:
    """Apply one elapsed second to *state*."""
    if state.status is SessionStatus.SKIPPED:
        return advance(state, plan)

    if state.status is SessionStatus.ONGOING:
        if state.remaining_seconds > 0:
            return replace(state, remaining_seconds=state.remaining_seconds - 1)
        return advance(state, plan)

    # Paused and complete sessions ignore the clock
    return state


def apply_command(state: SessionState, command: Command) -> SessionState:
    """
    Apply a pause, resume or skip command.

    Commands that do not fit the current status leave it unchanged, so
    repeating a command is harmless. QUIT is not a state transition and is
    handled by the sequencer.
    """
    if command is Command.PAUSE and state.status is SessionStatus.ONGOING:
        return replace(state, status=SessionStatus.PAUSED)

    if command is Command.RESUME and state.status is SessionStatus.PAUSED:
        return replace(state, status=SessionStatus.ONGOING)

    if command is Command.SKIP and state.status in (
        SessionStatus.ONGOING,
        SessionStatus.PAUSED,
    ):
        return replace(state, status=SessionStatus.SKIPPED)

    return state
