"""Home dashboard: pinned task and quote of the day."""

from __future__ import annotations

from datetime import date

from studymate.storage import KeyValueStore, StorageError
from studymate.utils.logger import get_logger

logger = get_logger()

PINNED_TASK_KEY = "@StudyMate:pinnedTask"

MOTIVATIONAL_QUOTES: list[tuple[str, str]] = [
    ("The secret of getting ahead is getting started.", "Mark Twain"),
    ("It’s not whether you get knocked down, it’s whether you get up.", "Vince Lombardi"),
    (
        "The future belongs to those who believe in the beauty of their dreams.",
        "Eleanor Roosevelt",
    ),
    ("Well done is better than well said.", "Benjamin Franklin"),
    ("Strive for progress, not perfection.", "Unknown"),
]


def greeting(display_name: str | None = None) -> str:
    return f"Hello, {display_name or 'User'}"


def quote_of_the_day(today: date | None = None) -> tuple[str, str]:
    """Pick a quote by day of the year so it changes daily."""
    today = today or date.today()
    day_of_year = today.timetuple().tm_yday
    return MOTIVATIONAL_QUOTES[day_of_year % len(MOTIVATIONAL_QUOTES)]


class HomeService:
    """Pinned-task widget backed by the local key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_pinned_task(self) -> str | None:
        try:
            return await self.store.get(PINNED_TASK_KEY)
        except StorageError as e:
            logger.error("failed to load pinned task: %s", e)
            return None

    async def pin_task(self, task: str) -> bool:
        """Pin ``task``.

        Raises:
            ValueError: if the task is blank
        """
        if not task.strip():
            raise ValueError("Please enter a task before pinning.")
        return await self.store.set(PINNED_TASK_KEY, task)

    async def unpin_task(self) -> bool:
        return await self.store.remove(PINNED_TASK_KEY)
