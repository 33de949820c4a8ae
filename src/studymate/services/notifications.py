"""Local notification scheduling."""

from __future__ import annotations

import asyncio
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable

from rich.console import Console
from rich.panel import Panel

from studymate.utils.logger import get_logger
from studymate.utils.ui.console import get_console

logger = get_logger()


class NotificationScheduler(ABC):
    """Fire-after-N-seconds notifications with cancel by id."""

    @abstractmethod
    async def schedule(
        self, delay_seconds: float, title: str, body: str, data: dict | None = None
    ) -> str:
        """Schedule a notification and return its id."""

    @abstractmethod
    async def cancel(self, notification_id: str | None) -> None:
        """Cancel a pending notification. Unknown or None ids are ignored."""


class NullNotifier(NotificationScheduler):
    """Accepts and drops every notification."""

    async def schedule(
        self, delay_seconds: float, title: str, body: str, data: dict | None = None
    ) -> str:
        logger.debug("notification dropped: %s", title)
        return str(uuid.uuid4())

    async def cancel(self, notification_id: str | None) -> None:
        return None


class ConsoleNotifier(NotificationScheduler):
    """Prints notifications to the terminal when they come due.

    With a ``sink`` the title and body are handed to it instead of printed,
    for displays that own the screen.
    """

    def __init__(
        self,
        console: Console | None = None,
        bell: bool = True,
        sink: Callable[[str, str], None] | None = None,
    ):
        self.console = console or get_console()
        self.bell = bell
        self.sink = sink
        self._pending: dict[str, asyncio.TimerHandle] = {}

    @property
    def pending(self) -> list[str]:
        return list(self._pending)

    async def schedule(
        self, delay_seconds: float, title: str, body: str, data: dict | None = None
    ) -> str:
        notification_id = str(uuid.uuid4())
        loop = asyncio.get_running_loop()
        self._pending[notification_id] = loop.call_later(
            max(0.0, delay_seconds), self._fire, notification_id, title, body
        )
        logger.debug("notification %s scheduled in %ss: %s", notification_id, delay_seconds, title)
        return notification_id

    async def cancel(self, notification_id: str | None) -> None:
        if notification_id is None:
            return
        handle = self._pending.pop(notification_id, None)
        if handle is not None:
            handle.cancel()
            logger.debug("notification %s cancelled", notification_id)

    def close(self) -> None:
        """Cancel everything still pending."""
        for handle in self._pending.values():
            handle.cancel()
        self._pending.clear()

    def _fire(self, notification_id: str, title: str, body: str) -> None:
        self._pending.pop(notification_id, None)
        if self.bell:
            self.console.bell()
        if self.sink is not None:
            self.sink(title, body)
            return
        self.console.print(Panel(body, title=title, border_style="cyan", expand=False))
