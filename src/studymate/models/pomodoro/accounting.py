"""Derived metrics over the session log."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from .session import Session, round_half_up


def sessions_on(sessions: Iterable[Session], day: date) -> list[Session]:
    """Sessions whose start falls on ``day`` in local time."""
    return [s for s in sessions if s.start_datetime.date() == day]


def today_total_seconds(sessions: Iterable[Session], now: datetime | None = None) -> int:
    """Sum of durations for sessions started on the current local date."""
    today = (now or datetime.now()).date()
    return sum(s.duration for s in sessions_on(sessions, today))


def today_total_minutes(sessions: Iterable[Session], now: datetime | None = None) -> int:
    """Today's focus time in whole minutes."""
    return round_half_up(today_total_seconds(sessions, now) / 60)


def daily_summary(sessions: Iterable[Session], now: datetime | None = None) -> dict[str, Any]:
    """
    Get summary for the current day.

    Returns:
        Dictionary with the date, session count and focus totals
    """
    now = now or datetime.now()
    todays = sessions_on(sessions, now.date())
    total_seconds = sum(s.duration for s in todays)
    total_minutes = round_half_up(total_seconds / 60)
    return {
        "date": now.date().isoformat(),
        "total_sessions": len(todays),
        "total_minutes": total_minutes,
        "total_hours": round(total_minutes / 60, 1),
    }
