"""Shared rich console with the StudyMate theme."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

from studymate.models.pomodoro import TimerMode

STUDYMATE_THEME = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "muted": "dim",
        "heading": "cyan",
        "mode.work": "bold cyan",
        "mode.break": "bold green",
        "mode.longBreak": "bold magenta",
        "mode.workFinished": "bold yellow",
    }
)


def mode_style(mode: TimerMode | str) -> str:
    """Theme style name for a timer mode."""
    return f"mode.{TimerMode(mode).value}"


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Console used by every command and the timer screen."""
    return Console(theme=STUDYMATE_THEME)
