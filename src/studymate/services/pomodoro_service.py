"""Pomodoro controller.

Owns one PomodoroMachine and executes the effects its transitions return:
driving the ticker, persisting sessions, scheduling notifications and
delayed auto-starts. Storage and notification failures are logged and never
stop the countdown.
"""

from __future__ import annotations

import asyncio
from datetime import datetime

from studymate.models.pomodoro import (
    AppendSession,
    AutoStart,
    CancelNotification,
    PomodoroMachine,
    RunState,
    ScheduleNotification,
    Session,
    StartTicker,
    StopTicker,
    TimerConfig,
    TimerMode,
    today_total_minutes,
)
from studymate.models.pomodoro.machine import Effect
from studymate.storage import SessionStore, StorageError
from studymate.utils.logger import get_logger

from .clock import Clock, SystemClock
from .notifications import NotificationScheduler, NullNotifier
from .ticker import AsyncioTicker, Ticker

logger = get_logger()


class PomodoroController:
    """Runs the Pomodoro timer against a session store."""

    def __init__(
        self,
        store: SessionStore,
        *,
        machine: PomodoroMachine | None = None,
        clock: Clock | None = None,
        ticker: Ticker | None = None,
        notifier: NotificationScheduler | None = None,
    ):
        self.store = store
        self.machine = machine or PomodoroMachine()
        self.clock = clock or SystemClock()
        self.ticker = ticker or AsyncioTicker()
        self.notifier = notifier or NullNotifier()

        self.sessions: list[Session] = []
        self.today_minutes = 0
        self._tracked_notification: str | None = None
        self._pending_start: asyncio.Task | None = None

    @property
    def state(self) -> RunState:
        return self.machine.state

    @property
    def config(self) -> TimerConfig:
        return self.machine.config

    @property
    def auto_start_pending(self) -> bool:
        return self._pending_start is not None

    # ------------------------------------------------------------------
    # Session log
    # ------------------------------------------------------------------

    async def load(self) -> list[Session]:
        """Read the session log and recompute today's total."""
        self.sessions = await self.store.load()
        self._recompute_today()
        return self.sessions

    async def clear_history(self) -> bool:
        """Remove all sessions. The cycle counter is left alone."""
        if not await self.store.clear():
            return False
        self.sessions = []
        self._recompute_today()
        return True

    # ------------------------------------------------------------------
    # Timer operations
    # ------------------------------------------------------------------

    async def start(self) -> None:
        self._cancel_pending_start()
        await self._run(self.machine.start(self.clock.now()))

    async def pause(self) -> None:
        self._cancel_pending_start()
        await self._run(self.machine.pause())

    async def toggle(self) -> None:
        """Start when idle, pause when running."""
        if self.state.is_running:
            await self.pause()
        else:
            await self.start()

    async def reset(self) -> None:
        self._cancel_pending_start()
        logger.info("timer reset after %d cycles", self.state.cycles_completed)
        await self._run(self.machine.reset())

    async def switch_mode(self, mode: TimerMode | str) -> None:
        self._cancel_pending_start()
        await self._run(self.machine.switch_mode(TimerMode(mode)))

    async def start_break(self) -> None:
        self._cancel_pending_start()
        await self._run(self.machine.start_break())

    async def apply_config(self, config: TimerConfig) -> None:
        await self._run(self.machine.apply_config(config))

    async def wait_for_auto_start(self) -> None:
        """Wait until a pending auto-start has run."""
        task = self._pending_start
        if task is not None:
            await task

    async def tick(self) -> None:
        """Advance the countdown by one second; the ticker calls this."""
        await self._run(self.machine.tick(self.clock.now()))

    async def close(self) -> None:
        """Stop the ticker and drop any pending auto-start."""
        self._cancel_pending_start()
        self.ticker.stop()
        await self._cancel_tracked_notification()

    # ------------------------------------------------------------------
    # Effect execution
    # ------------------------------------------------------------------

    async def _run(self, effects: list[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, StartTicker):
                self.ticker.start(self.tick)
            elif isinstance(effect, StopTicker):
                self.ticker.stop()
            elif isinstance(effect, CancelNotification):
                await self._cancel_tracked_notification()
            elif isinstance(effect, ScheduleNotification):
                await self._schedule(effect)
            elif isinstance(effect, AppendSession):
                await self._append(effect.session)
            elif isinstance(effect, AutoStart):
                self._schedule_start(effect.delay_ms)

    async def _append(self, session: Session) -> None:
        try:
            self.sessions = await self.store.append(session)
        except StorageError as e:
            logger.error("session %s not saved: %s", session.id, e)
            return
        self._recompute_today()

    async def _schedule(self, effect: ScheduleNotification) -> None:
        try:
            notification_id = await self.notifier.schedule(
                effect.delay_seconds, effect.title, effect.body, effect.data or None
            )
        except Exception as e:
            logger.warning("scheduling notification '%s' failed: %s", effect.title, e)
            return
        if effect.tracked:
            self._tracked_notification = notification_id

    async def _cancel_tracked_notification(self) -> None:
        notification_id, self._tracked_notification = self._tracked_notification, None
        if notification_id is None:
            return
        try:
            await self.notifier.cancel(notification_id)
        except Exception as e:
            logger.warning("cancelling notification %s failed: %s", notification_id, e)

    def _schedule_start(self, delay_ms: int) -> None:
        self._cancel_pending_start()
        self._pending_start = asyncio.get_running_loop().create_task(
            self._delayed_start(delay_ms)
        )

    async def _delayed_start(self, delay_ms: int) -> None:
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)
        self._pending_start = None
        logger.info("auto-starting %s", self.state.mode.value)
        await self._run(self.machine.start(self.clock.now()))

    def _cancel_pending_start(self) -> None:
        task, self._pending_start = self._pending_start, None
        if task is not None and task is not asyncio.current_task():
            task.cancel()

    def _recompute_today(self) -> None:
        now = datetime.fromtimestamp(self.clock.now() / 1000)
        self.today_minutes = today_total_minutes(self.sessions, now)
