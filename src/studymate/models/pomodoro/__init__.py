"""Pomodoro timer engine: state machine, sessions and accounting."""

from .accounting import daily_summary, sessions_on, today_total_minutes, today_total_seconds
from .machine import (
    AppendSession,
    AutoStart,
    CancelNotification,
    InvalidTransitionError,
    PomodoroMachine,
    RunState,
    ScheduleNotification,
    StartTicker,
    StopTicker,
    TimerMode,
)
from .session import Session, round_half_up
from .settings import TimerConfig, coerce_minutes

__all__ = [
    "AppendSession",
    "AutoStart",
    "CancelNotification",
    "InvalidTransitionError",
    "PomodoroMachine",
    "RunState",
    "ScheduleNotification",
    "Session",
    "StartTicker",
    "StopTicker",
    "TimerConfig",
    "TimerMode",
    "coerce_minutes",
    "daily_summary",
    "round_half_up",
    "sessions_on",
    "today_total_minutes",
    "today_total_seconds",
]
