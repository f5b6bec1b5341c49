"""Session sequencer driving a phase plan with a one-second clock."""

import time
from collections.abc import Callable
from dataclasses import dataclass

from pomodoro_cli.utils.logger import get_logger

from .clock import SessionClock
from .plan import Phase, PhaseKind
from .state import (
    Command,
    SessionState,
    SessionStatus,
    advance,
    apply_command,
    tick as tick_state,
)

# How long "Skipped" stays on screen after a skip lands in a new phase
SKIP_LABEL_SECONDS = 0.3


def format_duration(seconds: int) -> str:
    """Format seconds as MM:SS."""
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


@dataclass(frozen=True)
class RenderPayload:
    """What the presentation layer needs to draw one frame."""

    phase_index: int
    phases_total: int
    remaining_formatted: str
    phase_kind: PhaseKind
    status_label: str
    remaining_seconds: int
    duration_seconds: int

    @property
    def elapsed_seconds(self) -> int:
        return self.duration_seconds - self.remaining_seconds


class SessionSequencer:
    """
    Runs one phase at a time until the plan is exhausted.

    The sequencer owns the only SessionState of a session. Ticks and
    commands both arrive on the event loop thread, so each call runs to
    completion before the next one starts.
    """

    def __init__(
        self,
        plan: tuple[Phase, ...],
        clock: SessionClock,
        on_complete: Callable[[], None] | None = None,
        time_source: Callable[[], float] = time.monotonic,
    ):
        if not plan:
            raise ValueError("phase plan must not be empty")
        self.plan = plan
        self.clock = clock
        self.on_complete = on_complete
        self._time = time_source
        self._state = SessionState.initial(plan)
        self._stopped = False
        self._completion_notified = False
        self._skip_label_until: float | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    @property
    def stopped(self) -> bool:
        """True once the session was quit or has completed."""
        return self._stopped

    @property
    def status_label(self) -> str:
        if self._skip_label_until is not None:
            if self._time() < self._skip_label_until:
                return SessionStatus.SKIPPED.label
            self._skip_label_until = None
        return self._state.status.label

    def start(self) -> None:
        get_logger().info(
            "session started: %d phases, first %s",
            len(self.plan),
            self.plan[0].kind.value,
        )
        self.clock.start()

    def tick(self) -> RenderPayload | None:
        """
        Process one clock tick.

        Returns a payload for ongoing and skipped sessions, None when the
        session is paused, complete or quit.
        """
        if self._stopped:
            return None

        before = self._state
        if before.status not in (SessionStatus.ONGOING, SessionStatus.SKIPPED):
            return None

        if before.status is SessionStatus.SKIPPED:
            self._state = advance(before, self.plan)
            if not self._state.is_complete:
                self._skip_label_until = self._time() + SKIP_LABEL_SECONDS
        else:
            self._state = tick_state(before, self.plan)

        if self._state.current_phase_index != before.current_phase_index:
            self._log_phase_change(before)

        if self._state.is_complete:
            self._complete()

        return self.snapshot()

    def dispatch(self, command: Command) -> None:
        """Apply a command from the input router."""
        if self._stopped:
            return

        if command is Command.QUIT:
            get_logger().info(
                "session quit at phase %d/%d",
                self._state.current_phase_index + 1,
                len(self.plan),
            )
            self._stopped = True
            self.clock.stop()
            return

        before = self._state
        self._state = apply_command(before, command)
        if self._state != before:
            self._skip_label_until = None
            get_logger().debug(
                "command %s: %s -> %s",
                command.value,
                before.status.value,
                self._state.status.value,
            )

    def snapshot(self) -> RenderPayload:
        """Payload for the current state; a complete session shows its last phase."""
        index = min(self._state.current_phase_index, len(self.plan) - 1)
        phase = self.plan[index]
        remaining = self._state.remaining_seconds
        return RenderPayload(
            phase_index=index,
            phases_total=len(self.plan),
            remaining_formatted=format_duration(remaining),
            phase_kind=phase.kind,
            status_label=self.status_label,
            remaining_seconds=remaining,
            duration_seconds=phase.duration_seconds,
        )

    def _complete(self) -> None:
        self._stopped = True
        self.clock.stop()
        if self._completion_notified:
            return
        self._completion_notified = True
        get_logger().info("session complete")
        if self.on_complete:
            self.on_complete()

    def _log_phase_change(self, before: SessionState) -> None:
        if self._state.is_complete:
            return
        phase = self.plan[self._state.current_phase_index]
        get_logger().info(
            "phase %d/%d started: %s (%s)%s",
            self._state.current_phase_index + 1,
            len(self.plan),
            phase.kind.value,
            format_duration(phase.duration_seconds),
            " after skip" if before.status is SessionStatus.SKIPPED else "",
        )
