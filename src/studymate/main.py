"""Main entry point for StudyMate."""

import typer

from studymate import __version__
from studymate.commands import auth, home, notes, pomodoro, timetable
from studymate.commands.gpa import gpa
from studymate.utils.ui.console import get_console

app = typer.Typer(
    name="studymate",
    help="Student productivity toolkit: Pomodoro timer, notes, timetable and GPA",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(pomodoro.app, name="pomodoro", help="Pomodoro timer with session history")
app.add_typer(home.app, name="home", help="Quote of the day and pinned task")
app.add_typer(notes.app, name="notes", help="Notes commands")
app.add_typer(timetable.app, name="timetable", help="Timetable commands")
app.add_typer(auth.app, name="auth", help="Authentication commands")
app.command("gpa")(gpa)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]StudyMate[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
