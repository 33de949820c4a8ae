"""Completed focus sessions."""

from __future__ import annotations

import math
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Session:
    """One completed work interval.

    Timestamps are milliseconds since the epoch; ``duration`` is whole seconds.
    """

    id: str
    mode: str
    start: int
    end: int
    duration: int

    @classmethod
    def record(cls, start: int, end: int, mode: str = "work") -> Session:
        """Build a session for the interval ``start``..``end``."""
        if end < start:
            raise ValueError("Session end must not precede its start")
        return cls(
            id=str(uuid.uuid4()),
            mode=mode,
            start=start,
            end=end,
            duration=round_half_up((end - start) / 1000),
        )

    @property
    def start_datetime(self) -> datetime:
        """Local datetime the session started."""
        return datetime.fromtimestamp(self.start / 1000)

    @property
    def minutes(self) -> int:
        return round_half_up(self.duration / 60)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Session:
        """Create from a stored dictionary.

        Raises:
            KeyError, TypeError, ValueError: if the record is malformed or
                its timestamps are outside the representable date range
        """
        try:
            start = int(data["start"])
            end = int(data["end"])
            datetime.fromtimestamp(start / 1000)
            datetime.fromtimestamp(end / 1000)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Session timestamps out of range: {e}") from e
        if end < start:
            raise ValueError("Session end must not precede its start")

        duration = data.get("duration")
        if duration is None:
            duration = round_half_up((end - start) / 1000)
        duration = int(duration)
        if duration < 0:
            raise ValueError("Session duration cannot be negative")
        return cls(
            id=str(data.get("id") or end),
            mode=str(data.get("mode", "work")),
            start=start,
            end=end,
            duration=duration,
        )
