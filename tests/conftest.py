"""Shared test fixtures and configuration.

Provides a fake clock and a manually advanced ticker so timer tests never
wait on real time, plus isolation from the real config directories.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import patch

import pytest

from studymate.models.pomodoro import PomodoroMachine, TimerConfig
from studymate.services.pomodoro_service import PomodoroController
from studymate.storage import MemoryKeyValueStore, SessionStore

# 2026-03-10 09:00 local time
START_MS = int(datetime(2026, 3, 10, 9, 0, 0).timestamp() * 1000)


# ---------------------------------------------------------------------------
# Time sources
# ---------------------------------------------------------------------------


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now_ms: int = START_MS):
        self.now_ms = now_ms

    def now(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


class ManualTicker:
    """Ticker driven by ``advance``; each step is one elapsed second."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.starts = 0
        self._callback = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback) -> bool:
        if self._callback is not None:
            return False
        self._callback = callback
        self.starts += 1
        return True

    def stop(self) -> None:
        self._callback = None

    async def advance(self, seconds: int = 1) -> None:
        """Let ``seconds`` pass, ticking once per second while active."""
        for _ in range(seconds):
            self.clock.advance(1000)
            if self._callback is not None:
                await self._callback()


class RecordingNotifier:
    """NotificationScheduler that records every call in order."""

    def __init__(self):
        self.calls: list[tuple] = []
        self._next_id = 0

    async def schedule(self, delay_seconds, title, body, data=None) -> str:
        self._next_id += 1
        notification_id = f"n{self._next_id}"
        self.calls.append(("schedule", notification_id, delay_seconds, title))
        return notification_id

    async def cancel(self, notification_id) -> None:
        self.calls.append(("cancel", notification_id))

    @property
    def scheduled_titles(self) -> list[str]:
        return [c[3] for c in self.calls if c[0] == "schedule"]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def ticker(clock: FakeClock) -> ManualTicker:
    return ManualTicker(clock)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def make_controller(clock, ticker, notifier, kv_store):
    """Factory for a controller on fake time with zero auto-start delays."""

    def _make(config: TimerConfig | None = None, store=None, **machine_kwargs) -> PomodoroController:
        machine_kwargs.setdefault("auto_resume_delay_ms", 0)
        machine_kwargs.setdefault("break_start_delay_ms", 0)
        machine = PomodoroMachine(config or TimerConfig(), **machine_kwargs)
        return PomodoroController(
            SessionStore(store if store is not None else kv_store),
            machine=machine,
            clock=clock,
            ticker=ticker,
            notifier=notifier,
        )

    return _make


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from studymate.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("studymate.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("studymate.services.config_service.user_data_dir", return_value=tmpdir):
            yield get_config_service()
    get_config_service.cache_clear()
