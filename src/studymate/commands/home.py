"""Home dashboard commands."""

import os

import typer

from studymate.services.config_service import get_config_service
from studymate.services.home_service import HomeService, greeting, quote_of_the_day
from studymate.storage import FileKeyValueStore
from studymate.utils import exit_codes
from studymate.utils.ui.console import get_console
from studymate.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Home dashboard: quote of the day and pinned task")


def get_home_service() -> HomeService:
    return HomeService(FileKeyValueStore(get_config_service().store_dir))


@app.callback(invoke_without_command=True)
@command_wrapper
async def show(ctx: typer.Context) -> None:
    """Show the quote of the day and today's pinned task."""
    if ctx.invoked_subcommand is not None:
        return

    user = os.environ.get("USER") or os.environ.get("USERNAME")
    console.print(f"\n[bold]{greeting(user)}[/bold]")
    quote, author = quote_of_the_day()
    console.print(f'\n[italic]"{quote}"[/italic]\n[dim]— {author}[/dim]\n')

    pinned = await get_home_service().get_pinned_task()
    if pinned:
        console.print(f"[bold]Today's Pinned Task:[/bold] {pinned}\n")
    else:
        console.print("[dim]No pinned task. Use 'studymate home pin TEXT'.[/dim]\n")


@app.command("pin")
@command_wrapper
async def pin(task: str = typer.Argument(..., help="What's your main goal today?")) -> None:
    """Pin a task to the home dashboard."""
    try:
        saved = await get_home_service().pin_task(task)
    except ValueError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e
    if not saved:
        raise AppError("Failed to save the task.")
    format_success("Your task has been pinned!")


@app.command("unpin")
@command_wrapper
async def unpin() -> None:
    """Remove the pinned task."""
    if not await get_home_service().unpin_task():
        raise AppError("Failed to remove the task.")
    format_success("Pinned task removed")
