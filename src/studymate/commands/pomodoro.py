"""Pomodoro timer commands for StudyMate."""

import typer
from rich.prompt import Confirm
from rich.table import Table

from studymate.models.pomodoro import PomodoroMachine, daily_summary
from studymate.services.config_service import ConfigService, get_config_service
from studymate.services.notifications import ConsoleNotifier, NullNotifier
from studymate.services.pomodoro_service import PomodoroController
from studymate.storage import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore, SessionStore
from studymate.utils.ui.console import get_console
from studymate.utils.ui.formatters import format_info, format_success, sessions_table

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Pomodoro timer with session history")


def get_store(config_service: ConfigService, ephemeral: bool = False) -> KeyValueStore:
    """Key-value store for the current configuration."""
    if ephemeral:
        return MemoryKeyValueStore()
    return FileKeyValueStore(config_service.store_dir)


def build_controller(
    config_service: ConfigService,
    *,
    store: KeyValueStore | None = None,
    notifier=None,
    overrides: dict | None = None,
) -> PomodoroController:
    """Wire a PomodoroController from configuration."""
    settings = config_service.config.pomodoro
    timer = settings.timer_config().apply(**(overrides or {}))
    machine = PomodoroMachine(
        timer,
        auto_resume_delay_ms=settings.auto_resume_delay_ms,
        break_start_delay_ms=settings.break_start_delay_ms,
    )
    if notifier is None:
        notifier = NullNotifier()
    return PomodoroController(
        SessionStore(store or get_store(config_service)),
        machine=machine,
        notifier=notifier,
    )


@app.command("run")
@command_wrapper
async def run_timer(
    work: str | None = typer.Option(None, "--work", "-w", help="Work minutes"),
    short_break: str | None = typer.Option(None, "--short-break", "-s", help="Short break minutes"),
    long_break: str | None = typer.Option(None, "--long-break", "-l", help="Long break minutes"),
    cycles: str | None = typer.Option(None, "--cycles", "-c", help="Work cycles before a long break"),
    ephemeral: bool = typer.Option(False, "--ephemeral", help="Do not save sessions"),
) -> None:
    """Run the full-screen Pomodoro timer."""
    from studymate.utils.ui.keyboard import get_keyboard
    from studymate.utils.ui.timer_display import TimerDisplay

    config_service = get_config_service()
    notifications = config_service.config.notifications
    notifier = ConsoleNotifier(console, bell=notifications.bell)
    controller = build_controller(
        config_service,
        store=get_store(config_service, ephemeral),
        notifier=notifier if notifications.enabled else NullNotifier(),
        overrides={
            "work_minutes": work,
            "short_break_minutes": short_break,
            "long_break_minutes": long_break,
            "cycles_before_long_break": cycles,
        },
    )
    display = TimerDisplay(controller, console)
    notifier.sink = display.notify

    await controller.load()
    try:
        await display.run(get_keyboard())
    finally:
        await controller.close()
        notifier.close()

    state = controller.state
    console.print(
        f"\n[bold]Today's focus:[/bold] {controller.today_minutes} min  "
        f"[dim]({state.cycles_completed} cycles this run)[/dim]\n"
    )


@app.command("history")
@command_wrapper
async def history(
    limit: int = typer.Option(20, "--limit", "-n", help="Number of sessions to show"),
) -> None:
    """Show recent focus sessions."""
    sessions = await SessionStore(get_store(get_config_service())).load()
    if not sessions:
        console.print("[yellow]No sessions yet[/yellow]")
        return
    console.print(sessions_table(sessions[:limit]))


@app.command("today")
@command_wrapper
async def today() -> None:
    """Show today's total focus time."""
    sessions = await SessionStore(get_store(get_config_service())).load()
    summary = daily_summary(sessions)
    console.print(f"\n[bold]Today's Focus[/bold] ({summary['date']})\n")
    console.print(f"Sessions: {summary['total_sessions']}")
    console.print(f"Focus time: [green]{summary['total_minutes']} min[/green]")
    console.print()


@app.command("clear")
@command_wrapper
async def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete all session history."""
    if not yes and not Confirm.ask(
        "Are you sure you want to delete all session history?", default=False
    ):
        format_info("Nothing deleted")
        return

    store = SessionStore(get_store(get_config_service()))
    if not await store.clear():
        raise AppError("Could not clear history.")
    format_success("Session history cleared")


@app.command("settings")
@command_wrapper
def settings(
    work: str | None = typer.Option(None, "--work", "-w", help="Work minutes"),
    short_break: str | None = typer.Option(None, "--short-break", "-s", help="Short break minutes"),
    long_break: str | None = typer.Option(None, "--long-break", "-l", help="Long break minutes"),
    cycles: str | None = typer.Option(None, "--cycles", "-c", help="Work cycles before a long break"),
) -> None:
    """Show timer settings, or apply and save new ones."""
    config_service = get_config_service()
    values = {
        "work_minutes": work,
        "short_break_minutes": short_break,
        "long_break_minutes": long_break,
        "cycles_before_long_break": cycles,
    }
    if any(v is not None for v in values.values()):
        config_service.apply_pomodoro_settings(**values)
        format_success("Your new timer durations have been applied.")

    pomodoro = config_service.config.pomodoro
    table = Table(title="Pomodoro Settings (minutes)", show_header=True)
    table.add_column("Work", justify="right")
    table.add_column("Short Break", justify="right")
    table.add_column("Long Break", justify="right")
    table.add_column("Cycles", justify="right")
    table.add_row(
        str(pomodoro.work_minutes),
        str(pomodoro.short_break_minutes),
        str(pomodoro.long_break_minutes),
        str(pomodoro.cycles_before_long_break),
    )
    console.print(table)
