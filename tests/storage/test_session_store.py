"""Tests for the persistent session log."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock

import pytest

from studymate.models.pomodoro import Session
from studymate.storage import (
    SESSIONS_KEY,
    FileKeyValueStore,
    MemoryKeyValueStore,
    SessionStore,
    StorageError,
)


def _session(n: int) -> Session:
    return Session(id=f"s{n}", mode="work", start=n * 10_000, end=n * 10_000 + 1500_000, duration=1500)


class TestLoad:
    @pytest.mark.asyncio
    async def test_absent_key_is_empty(self) -> None:
        assert await SessionStore(MemoryKeyValueStore()).load() == []

    @pytest.mark.asyncio
    async def test_invalid_json_is_empty(self) -> None:
        store = SessionStore(MemoryKeyValueStore({SESSIONS_KEY: "{not json"}))
        assert await store.load() == []

    @pytest.mark.asyncio
    async def test_non_list_is_empty(self) -> None:
        store = SessionStore(MemoryKeyValueStore({SESSIONS_KEY: '{"id": 1}'}))
        assert await store.load() == []

    @pytest.mark.asyncio
    async def test_read_failure_is_empty(self) -> None:
        kv = MemoryKeyValueStore()
        kv.get = AsyncMock(side_effect=StorageError("boom"))
        assert await SessionStore(kv).load() == []

    @pytest.mark.asyncio
    async def test_malformed_records_skipped(self) -> None:
        raw = json.dumps([_session(1).to_dict(), {"mode": "work"}, "junk", _session(2).to_dict()])
        store = SessionStore(MemoryKeyValueStore({SESSIONS_KEY: raw}))

        assert [s.id for s in await store.load()] == ["s1", "s2"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "record",
        [
            '{"id": "inf", "start": 1e400, "end": 1e400, "duration": 60}',
            '{"id": "huge", "start": 100000000000000000000, "end": 100000000000000000001, "duration": 60}',
            '{"id": "backwards", "start": 5000, "end": 1000, "duration": 4}',
            '{"id": "negative", "start": 1000, "end": 5000, "duration": -4}',
            '{"id": "infdur", "start": 1000, "end": 5000, "duration": 1e400}',
        ],
    )
    async def test_out_of_range_records_skipped(self, record: str) -> None:
        raw = f"[{record}, {json.dumps(_session(1).to_dict())}]"
        store = SessionStore(MemoryKeyValueStore({SESSIONS_KEY: raw}))

        assert [s.id for s in await store.load()] == ["s1"]

    @pytest.mark.asyncio
    async def test_append_after_out_of_range_record(self) -> None:
        raw = '[{"id": "huge", "start": 100000000000000000000, "end": 100000000000000000001}]'
        store = SessionStore(MemoryKeyValueStore({SESSIONS_KEY: raw}))

        result = await store.append(_session(2))

        assert [s.id for s in result] == ["s2"]


class TestAppend:
    @pytest.mark.asyncio
    async def test_most_recent_first(self) -> None:
        store = SessionStore(MemoryKeyValueStore())
        await store.append(_session(1))
        result = await store.append(_session(2))

        assert [s.id for s in result] == ["s2", "s1"]
        assert [s.id for s in await store.load()] == ["s2", "s1"]

    @pytest.mark.asyncio
    async def test_stored_as_json_array(self) -> None:
        kv = MemoryKeyValueStore()
        await SessionStore(kv).append(_session(1))

        stored = json.loads(await kv.get(SESSIONS_KEY))
        assert stored == [{"id": "s1", "mode": "work", "start": 10_000, "end": 1_510_000, "duration": 1500}]

    @pytest.mark.asyncio
    async def test_failed_write_raises_and_keeps_log(self) -> None:
        kv = MemoryKeyValueStore()
        store = SessionStore(kv)
        await store.append(_session(1))
        kv.set = AsyncMock(return_value=False)

        with pytest.raises(StorageError):
            await store.append(_session(2))

        assert [s.id for s in await store.load()] == ["s1"]

    @pytest.mark.asyncio
    async def test_concurrent_appends_all_kept(self, tmp_path) -> None:
        store = SessionStore(FileKeyValueStore(tmp_path))

        await asyncio.gather(*(store.append(_session(n)) for n in range(10)))

        assert sorted(s.id for s in await store.load()) == sorted(f"s{n}" for n in range(10))

    @pytest.mark.asyncio
    async def test_log_survives_new_store_instance(self, tmp_path) -> None:
        await SessionStore(FileKeyValueStore(tmp_path)).append(_session(1))

        reloaded = await SessionStore(FileKeyValueStore(tmp_path)).load()
        assert reloaded == [_session(1)]


class TestClear:
    @pytest.mark.asyncio
    async def test_clear_empties_log(self) -> None:
        store = SessionStore(MemoryKeyValueStore())
        await store.append(_session(1))

        assert await store.clear() is True
        assert await store.load() == []

    @pytest.mark.asyncio
    async def test_clear_failure_reported(self) -> None:
        kv = MemoryKeyValueStore()
        kv.remove = AsyncMock(return_value=False)
        assert await SessionStore(kv).clear() is False
