"""Persistent Pomodoro session log."""

from __future__ import annotations

import asyncio
import json

from studymate.models.pomodoro import Session
from studymate.utils.logger import get_logger

from .kv import KeyValueStore, StorageError

logger = get_logger()

SESSIONS_KEY = "@StudyMate:pomodoro_sessions"


class SessionStore:
    """Session log kept most-recent-first as a JSON array under one key.

    Appends and clears are serialised by a lock so a read-modify-write never
    races another write to the same key.
    """

    def __init__(self, store: KeyValueStore, key: str = SESSIONS_KEY):
        self.store = store
        self.key = key
        self._lock = asyncio.Lock()

    async def load(self) -> list[Session]:
        """Read the log. Any failure is logged and yields an empty list."""
        try:
            return await self._read()
        except StorageError as e:
            logger.error("loading sessions failed: %s", e)
            return []

    async def append(self, session: Session) -> list[Session]:
        """Prepend ``session`` and persist the whole log.

        Returns:
            The log as written

        Raises:
            StorageError: if the log could not be read or written; the
                previously stored log is left intact
        """
        async with self._lock:
            sessions = [session, *await self._read()]
            payload = json.dumps([s.to_dict() for s in sessions])
            if not await self.store.set(self.key, payload):
                raise StorageError("Failed to write session log")
            logger.info("session %s recorded (%ss)", session.id, session.duration)
            return sessions

    async def clear(self) -> bool:
        """Drop every session."""
        async with self._lock:
            removed = await self.store.remove(self.key)
        if removed:
            logger.info("session history cleared")
        else:
            logger.error("clearing session history failed")
        return removed

    async def _read(self) -> list[Session]:
        raw = await self.store.get(self.key)
        if not raw:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Session log is not valid JSON: {e}") from e
        if not isinstance(records, list):
            raise StorageError("Session log is not a list")

        sessions = []
        for record in records:
            try:
                sessions.append(Session.from_dict(record))
            except (KeyError, TypeError, ValueError, OverflowError):
                logger.warning("skipping malformed session record: %r", record)
        return sessions
