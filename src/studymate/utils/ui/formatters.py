"""Output formatters for StudyMate."""

from __future__ import annotations

from rich.table import Table

from studymate.models.academics import Note, TimetableEntry
from studymate.models.pomodoro import Session

from .console import get_console

console = get_console()


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[error]Error:[/error] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[success]Success:[/success] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[warning]Warning:[/warning] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[info]Info:[/info] {message}")


def format_clock(seconds: int) -> str:
    """MM:SS for a countdown; minutes are not wrapped at 60."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def sessions_table(sessions: list[Session]) -> Table:
    """Recent sessions, most recent first."""
    table = Table(title=f"Recent Sessions ({len(sessions)})", show_header=True)
    table.add_column("Date", style="heading")
    table.add_column("Started")
    table.add_column("Duration", justify="right")

    for session in sessions:
        started = session.start_datetime
        table.add_row(
            started.strftime("%Y-%m-%d"),
            started.strftime("%H:%M"),
            f"{session.minutes} min",
        )
    return table


def notes_table(notes: list[Note]) -> Table:
    table = Table(title=f"Notes ({len(notes)})", show_header=True)
    table.add_column("ID", style="muted")
    table.add_column("Title", style="bold")
    table.add_column("Content")
    table.add_column("Updated", style="heading")

    for note in notes:
        content = note.content if len(note.content) <= 60 else note.content[:57] + "..."
        updated = note.updated_at.strftime("%Y-%m-%d %H:%M") if note.updated_at else "—"
        table.add_row(note.id, note.title, content, updated)
    return table


def timetable_table(entries: list[TimetableEntry]) -> Table:
    table = Table(title="Timetable", show_header=True)
    table.add_column("ID", style="muted")
    table.add_column("Day", style="heading")
    table.add_column("Time")
    table.add_column("Subject", style="bold")
    table.add_column("Type")

    for entry in entries:
        table.add_row(entry.id, entry.day, entry.time, entry.subject, entry.type)
    return table
