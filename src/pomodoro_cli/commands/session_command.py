"""Session command - run a Pomodoro session in the terminal."""

import time
from collections.abc import Callable

from rich.console import Console
from rich.live import Live

from pomodoro_cli.config import UIConfig
from pomodoro_cli.models.focus.clock import SessionClock
from pomodoro_cli.models.focus.keyboard import InputRouter, get_keyboard_handler
from pomodoro_cli.models.focus.plan import PomodoroConfig
from pomodoro_cli.models.focus.sequencer import SessionSequencer
from pomodoro_cli.models.focus.state import Command
from pomodoro_cli.models.focus.ui import SessionDisplay, show_hint
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

RESULT_COMPLETED = "completed"
RESULT_QUIT = "quit"


def run_session(
    config: PomodoroConfig,
    ui: UIConfig | None = None,
    console: Console | None = None,
    keyboard=None,
    clock: SessionClock | None = None,
    time_source: Callable[[], float] = time.monotonic,
) -> str:
    """
    Run a full session until it completes or the user quits.

    One loop on the calling thread waits for a key (never past the next
    tick), routes it to the sequencer, then feeds every due tick. The
    terminal mode is restored on every exit path.

    Returns "completed" or "quit".
    """
    logger = get_logger()
    ui = ui or UIConfig()
    console = console or get_console()

    plan = config.build_plan()
    keyboard = keyboard or get_keyboard_handler()
    clock = clock or SessionClock(time_source=time_source)
    router = InputRouter()

    sequencer = SessionSequencer(plan, clock, time_source=time_source)
    display = SessionDisplay(plan, console, bar_width=ui.bar_width)
    frame_seconds = 1.0 / ui.refresh_per_second
    current_phase = 0

    logger.info(
        "starting session: focus=%d short_break=%d long_break=%d rounds=%d",
        config.focus,
        config.short_break,
        config.long_break,
        config.rounds,
    )
    try:
        show_hint(console)
        display.update(sequencer.snapshot())
        with Live(
            display.render(),
            console=console,
            refresh_per_second=ui.refresh_per_second,
        ) as live:
            sequencer.start()
            while not sequencer.stopped:
                timeout = min(clock.seconds_until_next_tick(), frame_seconds)
                command = router.route(
                    keyboard.get_key(timeout), sequencer.state.status
                )
                if command is not None:
                    sequencer.dispatch(command)
                    if command is Command.QUIT:
                        break

                for _ in range(clock.due_ticks()):
                    payload = sequencer.tick()
                    if payload is None:
                        continue
                    if payload.phase_index != current_phase:
                        current_phase = payload.phase_index
                        if ui.bell:
                            console.bell()
                    display.update(payload, complete=sequencer.is_complete)

                display.update(sequencer.snapshot(), complete=sequencer.is_complete)
                live.update(display.render())
    except KeyboardInterrupt:
        # Ctrl-C before or during the loop ends the session the same way
        sequencer.dispatch(Command.QUIT)
    finally:
        keyboard.stop()

    return RESULT_COMPLETED if sequencer.is_complete else RESULT_QUIT
