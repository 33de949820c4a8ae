"""Decorators for command functions."""

import asyncio
import functools
import time
import traceback
from collections.abc import Callable

import httpx
import typer

from studymate.services.api.client import NotAuthenticatedError
from studymate.utils import exit_codes
from studymate.utils.logger import get_logger
from studymate.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _api_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase


def command_wrapper(func: Callable):
    """Log, time and translate errors for a command; runs coroutines with asyncio."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if asyncio.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except typer.Exit:
            raise

        except AppError as e:
            logger.error("command failed: %s (%.3fs) - %s", cmd, time.monotonic() - start, e)
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except NotAuthenticatedError as e:
            logger.error("command failed: %s - not authenticated", cmd)
            format_error(str(e))
            raise typer.Exit(code=exit_codes.ERROR_AUTH_FAILURE) from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("command failed: %s - HTTP %d", cmd, status)
            format_error(f"API error ({status}): {_api_message(e.response)}")
            raise typer.Exit(code=exit_codes.exit_code_for_status(status)) from e

        except httpx.RequestError as e:
            logger.error("command failed: %s - %s", cmd, e)
            format_error(f"Could not reach the API: {e}")
            raise typer.Exit(code=exit_codes.ERROR_NETWORK) from e

        except Exception as e:
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                time.monotonic() - start,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
