"""Progress bar display for a Pomodoro session."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .plan import Phase, PhaseKind
from .sequencer import RenderPayload, format_duration

HINT = "Pomodoro - Press <p> to play/pause | <s> to skip | <Ctrl-C> to exit"

PHASE_STYLES = {
    PhaseKind.FOCUS: "bold blue",
    PhaseKind.SHORT_BREAK: "bold green",
    PhaseKind.LONG_BREAK: "bold magenta",
}
BAR_STYLE = "bold blue"
STATUS_STYLE = "bold grey50"
COMPLETE_STYLE = "bold blue"

BAR_COMPLETE_CHAR = "█"
BAR_INCOMPLETE_CHAR = "░"

# Column widths so rows line up for up to 99 phases
LABEL_WIDTH = 11
KIND_WIDTH = 11


class SessionDisplay:
    """Draws one bar per phase and a status line below them."""

    def __init__(
        self,
        plan: tuple[Phase, ...],
        console: Console | None = None,
        bar_width: int = 30,
    ):
        self.plan = plan
        self.console = console or Console()
        self.bar_width = bar_width
        self.elapsed = [0] * len(plan)
        self.status_label = ""
        self.complete = False

    def update(self, payload: RenderPayload, complete: bool = False) -> None:
        """
        Record a frame from the sequencer.

        A complete session only changes the status line so a skipped final
        phase keeps the progress it had reached.
        """
        if not complete:
            self.elapsed[payload.phase_index] = payload.elapsed_seconds
        self.status_label = payload.status_label
        self.complete = complete

    def render(self) -> Group:
        rows = [self._phase_row(index) for index in range(len(self.plan))]
        rows.append(self._status_row())
        return Group(*rows)

    def _bar(self, elapsed: int, total: int) -> str:
        filled = int(self.bar_width * elapsed / total) if total > 0 else 0
        filled = min(self.bar_width, filled)
        return BAR_COMPLETE_CHAR * filled + BAR_INCOMPLETE_CHAR * (
            self.bar_width - filled
        )

    def _phase_row(self, index: int) -> Text:
        phase = self.plan[index]
        elapsed = self.elapsed[index]
        label = f"Phase {index + 1}/{len(self.plan)}".rjust(LABEL_WIDTH)

        row = Text()
        row.append(label)
        row.append(" | ")
        row.append(self._bar(elapsed, phase.duration_seconds), style=BAR_STYLE)
        row.append(" | ")
        row.append(format_duration(phase.duration_seconds - elapsed))
        row.append(" ")
        row.append(phase.kind.value.ljust(KIND_WIDTH), style=PHASE_STYLES[phase.kind])
        return row

    def _status_row(self) -> Text:
        row = Text("STATUS: ▶ ", style=STATUS_STYLE)
        row.append(
            self.status_label,
            style=COMPLETE_STYLE if self.complete else STATUS_STYLE,
        )
        return row


def show_hint(console: Console | None = None) -> None:
    """Print the keyboard controls before the session starts."""
    console = console or Console()
    console.print(Text(HINT, style=STATUS_STYLE))


def show_completion_message(rounds: int, console: Console | None = None):
    """Show a message after the last phase ends."""
    console = console or Console()

    panel = Panel(
        f"""[bold green]Pomodoro Session Complete![/bold green]

Rounds: {rounds}""",
        border_style="green",
        padding=(1, 2),
    )

    console.print(panel)


def show_exit_message(console: Console | None = None):
    """Show a message when the session is quit early."""
    console = console or Console()
    console.print()
    console.print("[bold red underline]Program exited[/bold red underline]")
