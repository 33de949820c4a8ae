"""Pomodoro timer durations."""

from dataclasses import dataclass, fields, replace
from typing import Any


def coerce_minutes(value: Any, fallback: int) -> int:
    """Parse ``value`` as a positive whole number.

    Unparseable input keeps ``fallback``; anything below 1 clamps to 1.
    Strings are read like a leading-integer parse, so ``"12abc"`` is 12.
    """
    if isinstance(value, bool) or value is None:
        return fallback
    if isinstance(value, int):
        return max(1, value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return fallback
        return max(1, int(value))

    text = str(value).strip()
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        parsed = int(digits)
    except ValueError:
        return fallback
    return max(1, parsed)


@dataclass(frozen=True)
class TimerConfig:
    """Durations in minutes plus the long-break cadence."""

    work_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    cycles_before_long_break: int = 4

    @property
    def work_seconds(self) -> int:
        return self.work_minutes * 60

    @property
    def short_break_seconds(self) -> int:
        return self.short_break_minutes * 60

    @property
    def long_break_seconds(self) -> int:
        return self.long_break_minutes * 60

    def apply(self, **raw: Any) -> "TimerConfig":
        """Return a copy with each given field coerced against its current value.

        ``None`` values are ignored so callers can pass optional CLI flags through.
        """
        known = {f.name for f in fields(self)}
        unknown = set(raw) - known
        if unknown:
            raise TypeError(f"Unknown timer settings: {', '.join(sorted(unknown))}")

        updates = {
            name: coerce_minutes(value, getattr(self, name))
            for name, value in raw.items()
            if value is not None
        }
        return replace(self, **updates)
