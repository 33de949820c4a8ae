"""Wall-clock time source."""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Milliseconds since the epoch."""
        ...


class SystemClock:
    """Clock backed by ``time.time``."""

    def now(self) -> int:
        return int(time.time() * 1000)
