"""Timetable commands."""

import typer
from pydantic import ValidationError

from studymate.services.api.client import get_client
from studymate.services.api.timetable import TimetableAPI
from studymate.utils import exit_codes
from studymate.utils.ui.console import get_console
from studymate.utils.ui.formatters import format_success, timetable_table

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Class timetable stored on the StudyMate server")

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _day_order(day: str) -> int:
    try:
        return DAYS.index(day.capitalize())
    except ValueError:
        return len(DAYS)


@app.command("list")
@command_wrapper
async def list_entries(
    day: str | None = typer.Option(None, "--day", "-d", help="Only this day"),
) -> None:
    """Show the timetable, grouped by weekday."""
    async with get_client() as client:
        entries = await TimetableAPI(client).list_entries()
    if day:
        entries = [e for e in entries if e.day.lower() == day.lower()]
    if not entries:
        console.print("[yellow]No classes scheduled[/yellow]")
        return
    entries.sort(key=lambda e: (_day_order(e.day), e.time))
    console.print(timetable_table(entries))


@app.command("add")
@command_wrapper
async def add_entry(
    day: str = typer.Argument(..., help="Weekday, e.g. Monday"),
    time: str = typer.Argument(..., help="Start time, e.g. 09:00"),
    subject: str = typer.Argument(..., help="Subject name"),
    type: str = typer.Option("Lecture", "--type", "-t", help="Lecture, Lab, Tutorial..."),
) -> None:
    """Add a class to the timetable."""
    try:
        async with get_client() as client:
            entry = await TimetableAPI(client).create_entry(day, time, subject, type=type)
    except ValidationError as e:
        raise AppError("Day, time and subject are required.", exit_codes.ERROR_INVALID_ARGS) from e
    format_success(f"Added {entry.subject} on {entry.day} at {entry.time}")


@app.command("edit")
@command_wrapper
async def edit_entry(
    entry_id: str = typer.Argument(..., help="Entry ID"),
    day: str | None = typer.Option(None, "--day", "-d", help="New weekday"),
    time: str | None = typer.Option(None, "--time", help="New start time"),
    subject: str | None = typer.Option(None, "--subject", "-s", help="New subject"),
    type: str | None = typer.Option(None, "--type", "-t", help="New class type"),
) -> None:
    """Change a class in the timetable."""
    updates = {"day": day, "time": time, "subject": subject, "type": type}
    if all(v is None for v in updates.values()):
        raise AppError(
            "Nothing to update; pass --day, --time, --subject or --type.",
            exit_codes.ERROR_INVALID_ARGS,
        )
    if any(v is not None and not v.strip() for v in updates.values()):
        raise AppError("Day, time and subject are required.", exit_codes.ERROR_INVALID_ARGS)
    async with get_client() as client:
        entry = await TimetableAPI(client).update_entry(entry_id, **updates)
    format_success(f"Updated {entry.subject} on {entry.day} at {entry.time}")


@app.command("delete")
@command_wrapper
async def delete_entry(entry_id: str = typer.Argument(..., help="Entry ID")) -> None:
    """Remove a class from the timetable."""
    async with get_client() as client:
        await TimetableAPI(client).delete_entry(entry_id)
    format_success("Class removed")
