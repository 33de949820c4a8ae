"""Authentication commands."""

import typer

from studymate.services.config_service import get_config_service
from studymate.utils import exit_codes
from studymate.utils.ui.formatters import format_info, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Manage the identity token used for the StudyMate API")


@app.command("login")
@command_wrapper
def login(
    token: str = typer.Option(..., "--token", prompt=True, hide_input=True, help="Identity token"),
) -> None:
    """Store the identity token sent with every API request."""
    if not token.strip():
        raise AppError("Token cannot be empty", exit_codes.ERROR_INVALID_ARGS)
    get_config_service().save_credentials(token.strip())
    format_success("Logged in")


@app.command("logout")
@command_wrapper
def logout() -> None:
    """Forget the stored identity token."""
    config_service = get_config_service()
    if config_service.load_credentials() is None:
        format_info("Not logged in")
        return
    config_service.clear_credentials()
    format_success("Logged out")
