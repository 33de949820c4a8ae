"""Notes API endpoints."""

from typing import Any

from studymate.models.academics import Note, NoteCreate
from studymate.services.api.client import APIClient


class NotesAPI:
    """Notes API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_notes(self) -> list[Note]:
        """List the caller's notes, most recently updated first."""
        response = await self.client.get("/notes")
        return [Note.model_validate(item) for item in response.json()]

    async def create_note(self, title: str, content: str) -> Note:
        """Create a new note."""
        payload = NoteCreate(title=title, content=content)
        response = await self.client.post("/notes", json=payload.model_dump())
        return Note.model_validate(response.json())

    async def update_note(self, note_id: str, **updates: Any) -> Note:
        """Update a note."""
        data = {k: v for k, v in updates.items() if v is not None}
        response = await self.client.put(f"/notes/{note_id}", json=data)
        return Note.model_validate(response.json())

    async def delete_note(self, note_id: str) -> None:
        """Delete a note."""
        await self.client.delete(f"/notes/{note_id}")
