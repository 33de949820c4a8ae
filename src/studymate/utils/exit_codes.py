"""
Exit codes for StudyMate.

Semantic exit codes so scripts can tell what happened.
"""

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Authentication failure (no token, token rejected)
ERROR_AUTH_FAILURE = 3

# Network or API error (server unreachable, timeout, etc.)
ERROR_NETWORK = 4

# Resource not found
ERROR_NOT_FOUND = 5


def exit_code_for_status(status_code: int) -> int:
    """Map an HTTP status from the API to an exit code."""
    if status_code == 401 or status_code == 403:
        return ERROR_AUTH_FAILURE
    if status_code == 404:
        return ERROR_NOT_FOUND
    if 400 <= status_code < 500:
        return ERROR_INVALID_ARGS
    return ERROR_NETWORK
