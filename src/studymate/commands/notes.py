"""Notes commands."""

import typer
from pydantic import ValidationError

from studymate.services.api.client import get_client
from studymate.services.api.notes import NotesAPI
from studymate.utils import exit_codes
from studymate.utils.ui.console import get_console
from studymate.utils.ui.formatters import format_success, notes_table

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Notes stored on the StudyMate server")


@app.command("list")
@command_wrapper
async def list_notes() -> None:
    """List your notes."""
    async with get_client() as client:
        notes = await NotesAPI(client).list_notes()
    if not notes:
        console.print("[yellow]No notes yet[/yellow]")
        return
    console.print(notes_table(notes))


@app.command("add")
@command_wrapper
async def add_note(
    title: str = typer.Argument(..., help="Note title"),
    content: str = typer.Argument(..., help="Note content"),
) -> None:
    """Create a note."""
    try:
        async with get_client() as client:
            note = await NotesAPI(client).create_note(title, content)
    except ValidationError as e:
        raise AppError("Title and content are required.", exit_codes.ERROR_INVALID_ARGS) from e
    format_success(f"Note created: {note.title} ({note.id})")


@app.command("edit")
@command_wrapper
async def edit_note(
    note_id: str = typer.Argument(..., help="Note ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    content: str | None = typer.Option(None, "--content", "-c", help="New content"),
) -> None:
    """Update a note's title or content."""
    if title is None and content is None:
        raise AppError("Nothing to update; pass --title or --content.", exit_codes.ERROR_INVALID_ARGS)
    async with get_client() as client:
        note = await NotesAPI(client).update_note(note_id, title=title, content=content)
    format_success(f"Note updated: {note.title}")


@app.command("delete")
@command_wrapper
async def delete_note(note_id: str = typer.Argument(..., help="Note ID")) -> None:
    """Delete a note."""
    async with get_client() as client:
        await NotesAPI(client).delete_note(note_id)
    format_success("Note removed")
