"""GPA calculator command."""

import typer

from studymate.models.academics import GPAError, calculate_gpa, parse_subject
from studymate.utils import exit_codes
from studymate.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

console = get_console()


@command_wrapper
def gpa(
    subjects: list[str] = typer.Argument(
        ..., help="One CREDITS:GRADE pair per subject, e.g. 3:4.0 4:3.7"
    ),
) -> None:
    """Calculate a credit-weighted GPA."""
    try:
        result = calculate_gpa(parse_subject(s) for s in subjects)
    except GPAError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e
    console.print(f"Your GPA is: [bold green]{result:.2f}[/bold green]")
