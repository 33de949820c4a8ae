"""Local persistence: key-value store and session log."""

from .kv import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore, StorageError
from .session_store import SESSIONS_KEY, SessionStore

__all__ = [
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SESSIONS_KEY",
    "SessionStore",
    "StorageError",
]
