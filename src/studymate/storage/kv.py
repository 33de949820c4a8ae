"""Local key-value storage.

String values keyed by short names such as ``@StudyMate:pinnedTask``.
Reads return None when a key is absent; writes report success as a bool
and log failures instead of raising.
"""

from __future__ import annotations

import asyncio
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from platformdirs import user_data_dir

from studymate.utils.logger import get_logger

logger = get_logger()

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class StorageError(Exception):
    """Raised when a storage read or write cannot be completed."""


class KeyValueStore(ABC):
    """Async string key-value store."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent.

        Raises:
            StorageError: if the value exists but cannot be read
        """

    @abstractmethod
    async def set(self, key: str, value: str) -> bool:
        """Store ``value``; False if the write failed."""

    @abstractmethod
    async def remove(self, key: str) -> bool:
        """Delete ``key``; removing an absent key succeeds."""


class MemoryKeyValueStore(KeyValueStore):
    """In-process store. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> bool:
        self._data[key] = value
        return True

    async def remove(self, key: str) -> bool:
        self._data.pop(key, None)
        return True


class FileKeyValueStore(KeyValueStore):
    """One file per key under ``directory``.

    Writes land in a temporary file that is renamed over the target, so a
    concurrent or later reader sees either the previous value or the new
    one, never a partial write.
    """

    def __init__(self, directory: Path | str | None = None):
        if directory is None:
            directory = Path(user_data_dir("studymate")) / "store"
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """File backing ``key``."""
        if not key:
            raise ValueError("key cannot be empty")
        return self.directory / (_UNSAFE_CHARS.sub("_", key) + ".json")

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._read, self.path_for(key))

    async def set(self, key: str, value: str) -> bool:
        path = self.path_for(key)
        try:
            await asyncio.to_thread(self._write, path, value)
        except OSError as e:
            logger.error("storage write failed for %s: %s", key, e)
            return False
        return True

    async def remove(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logger.error("storage remove failed for %s: %s", key, e)
            return False
        return True

    @staticmethod
    def _read(path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path.name}: {e}") from e

    @staticmethod
    def _write(path: Path, value: str) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
