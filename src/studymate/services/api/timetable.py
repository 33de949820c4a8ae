"""Timetable API endpoints."""

from typing import Any

from studymate.models.academics import TimetableEntry, TimetableEntryCreate
from studymate.services.api.client import APIClient


class TimetableAPI:
    """Timetable API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_entries(self) -> list[TimetableEntry]:
        response = await self.client.get("/timetable")
        return [TimetableEntry.model_validate(item) for item in response.json()]

    async def create_entry(
        self, day: str, time: str, subject: str, *, type: str = "Lecture"
    ) -> TimetableEntry:
        """Create a new timetable entry."""
        payload = TimetableEntryCreate(day=day, time=time, subject=subject, type=type)
        response = await self.client.post("/timetable", json=payload.model_dump())
        return TimetableEntry.model_validate(response.json())

    async def update_entry(self, entry_id: str, **updates: Any) -> TimetableEntry:
        data = {k: v for k, v in updates.items() if v is not None}
        response = await self.client.put(f"/timetable/{entry_id}", json=data)
        return TimetableEntry.model_validate(response.json())

    async def delete_entry(self, entry_id: str) -> None:
        await self.client.delete(f"/timetable/{entry_id}")
