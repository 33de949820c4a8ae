"""Pomodoro timer state machine.

The machine owns the run state and applies transitions, but performs no I/O.
Every operation returns the list of effects the caller must execute, in order:
ticker control, notification scheduling, session appends and delayed
auto-starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .session import Session
from .settings import TimerConfig


class TimerMode(str, Enum):
    """Phase of the timer. Values match the persisted representation."""

    WORK = "work"
    BREAK = "break"
    LONG_BREAK = "longBreak"
    WORK_FINISHED = "workFinished"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]


_MODE_LABELS = {
    TimerMode.WORK: "Focus Time",
    TimerMode.BREAK: "Short Break",
    TimerMode.LONG_BREAK: "Long Break",
    TimerMode.WORK_FINISHED: "Session Complete!",
}


class InvalidTransitionError(ValueError):
    """Raised when an operation is not allowed in the current mode."""


@dataclass
class RunState:
    """Transient timer state. Never persisted."""

    mode: TimerMode = TimerMode.WORK
    remaining_seconds: int = 0
    is_running: bool = False
    cycles_completed: int = 0
    active_start: int | None = None


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StartTicker:
    """Begin the one-second countdown source."""


@dataclass(frozen=True)
class StopTicker:
    """Stop the countdown source; no pending tick may fire afterwards."""


@dataclass(frozen=True)
class ScheduleNotification:
    """Fire a notification after ``delay_seconds``.

    A ``tracked`` notification replaces the single cancellable slot; the
    machine always emits a ``CancelNotification`` before one.
    """

    delay_seconds: int
    title: str
    body: str
    tracked: bool = False
    data: dict = field(default_factory=dict)


@dataclass(frozen=True)
class CancelNotification:
    """Cancel the tracked notification, if any."""


@dataclass(frozen=True)
class AppendSession:
    session: Session


@dataclass(frozen=True)
class AutoStart:
    """Call ``start`` again after a UI delay (milliseconds, may be 0)."""

    delay_ms: int


Effect = StartTicker | StopTicker | ScheduleNotification | CancelNotification | AppendSession | AutoStart

WORK_STARTED = ("Work Session Started 🚀", "Time to focus!")
BREAK_STARTED = ("Break Started ☕️", "Time to relax and recharge!")
BREAK_OVER = ("Break's Over!", "Time to get back to work.")
WORK_FINISHED = ("Great Job! 🎉", "Work session finished. Time for a break.")


class PomodoroMachine:
    """Work/break cycling with session accounting."""

    def __init__(
        self,
        config: TimerConfig | None = None,
        *,
        auto_resume_delay_ms: int = 1000,
        break_start_delay_ms: int = 250,
    ):
        self.config = config or TimerConfig()
        self.auto_resume_delay_ms = max(0, auto_resume_delay_ms)
        self.break_start_delay_ms = max(0, break_start_delay_ms)
        self.state = RunState(remaining_seconds=self.config.work_seconds)

    def duration_for(self, mode: TimerMode) -> int:
        """Configured length of ``mode`` in seconds."""
        if mode == TimerMode.WORK:
            return self.config.work_seconds
        if mode == TimerMode.BREAK:
            return self.config.short_break_seconds
        if mode == TimerMode.LONG_BREAK:
            return self.config.long_break_seconds
        return 0

    def next_break_mode(self) -> TimerMode:
        """Break that follows the work intervals completed so far."""
        cycles = self.state.cycles_completed
        if cycles > 0 and cycles % self.config.cycles_before_long_break == 0:
            return TimerMode.LONG_BREAK
        return TimerMode.BREAK

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------

    def start(self, now: int) -> list[Effect]:
        """Run the countdown from its current value."""
        state = self.state
        if state.is_running:
            return []

        if state.mode == TimerMode.WORK_FINISHED:
            self._enter_break()

        state.is_running = True
        effects: list[Effect] = [StartTicker()]

        if state.mode == TimerMode.WORK:
            state.active_start = now
            effects.append(ScheduleNotification(1, *WORK_STARTED))
        else:
            effects.append(CancelNotification())
            effects.append(
                ScheduleNotification(
                    state.remaining_seconds,
                    *BREAK_OVER,
                    tracked=True,
                    data={"screen": "Pomodoro"},
                )
            )
            effects.append(ScheduleNotification(1, *BREAK_STARTED))
        return effects

    def pause(self) -> list[Effect]:
        """Freeze the countdown."""
        if not self.state.is_running:
            return []
        self.state.is_running = False
        return [StopTicker(), CancelNotification()]

    def reset(self) -> list[Effect]:
        """Back to an idle work interval with the cycle counter cleared."""
        state = self.state
        state.is_running = False
        state.mode = TimerMode.WORK
        state.remaining_seconds = self.config.work_seconds
        state.cycles_completed = 0
        state.active_start = None
        return [StopTicker(), CancelNotification()]

    def switch_mode(self, mode: TimerMode) -> list[Effect]:
        """Jump to ``mode`` with its full configured duration, stopped."""
        mode = TimerMode(mode)
        if mode == TimerMode.WORK_FINISHED:
            raise InvalidTransitionError("Cannot switch to workFinished manually")
        state = self.state
        state.is_running = False
        state.mode = mode
        state.remaining_seconds = self.duration_for(mode)
        state.active_start = None
        return [StopTicker(), CancelNotification()]

    def start_break(self) -> list[Effect]:
        """Leave ``workFinished`` for the next break, auto-starting it."""
        if self.state.mode != TimerMode.WORK_FINISHED:
            raise InvalidTransitionError(
                f"Can only start a break after a work interval, not from {self.state.mode.value}"
            )
        self._enter_break()
        return [AutoStart(self.break_start_delay_ms)]

    def apply_config(self, config: TimerConfig) -> list[Effect]:
        """Use new durations. An idle display is reset to the new length."""
        self.config = config
        state = self.state
        if not state.is_running and state.mode != TimerMode.WORK_FINISHED:
            state.remaining_seconds = self.duration_for(state.mode)
        return []

    # ------------------------------------------------------------------
    # Countdown
    # ------------------------------------------------------------------

    def tick(self, now: int) -> list[Effect]:
        """Advance the countdown by one second."""
        state = self.state
        if not state.is_running:
            return []
        if state.remaining_seconds <= 1:
            state.remaining_seconds = 0
            return self._finish_interval(now)
        state.remaining_seconds -= 1
        return []

    def _finish_interval(self, now: int) -> list[Effect]:
        state = self.state
        state.is_running = False
        effects: list[Effect] = [StopTicker(), CancelNotification()]

        if state.mode == TimerMode.WORK:
            start = state.active_start
            if start is None:
                start = now - self.config.work_seconds * 1000
            session = Session.record(start=min(start, now), end=now)
            effects.append(AppendSession(session))
            effects.append(ScheduleNotification(1, *WORK_FINISHED))
            state.active_start = None
            state.cycles_completed += 1
            state.mode = TimerMode.WORK_FINISHED
        else:
            state.mode = TimerMode.WORK
            state.remaining_seconds = self.config.work_seconds
            effects.append(AutoStart(self.auto_resume_delay_ms))
        return effects

    def _enter_break(self) -> None:
        mode = self.next_break_mode()
        self.state.mode = mode
        self.state.remaining_seconds = self.duration_for(mode)
        self.state.active_start = None
