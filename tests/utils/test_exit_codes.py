"""Tests for studymate.utils.exit_codes."""

from __future__ import annotations

import pytest

from studymate.utils.exit_codes import (
    ERROR_AUTH_FAILURE,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NETWORK,
    ERROR_NOT_FOUND,
    exit_code_for_status,
)


def test_codes_are_distinct():
    codes = [ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_AUTH_FAILURE, ERROR_NETWORK, ERROR_NOT_FOUND]
    assert codes == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (400, ERROR_INVALID_ARGS),
        (401, ERROR_AUTH_FAILURE),
        (403, ERROR_AUTH_FAILURE),
        (404, ERROR_NOT_FOUND),
        (422, ERROR_INVALID_ARGS),
        (500, ERROR_NETWORK),
        (503, ERROR_NETWORK),
    ],
)
def test_status_mapping(status, expected):
    assert exit_code_for_status(status) == expected
