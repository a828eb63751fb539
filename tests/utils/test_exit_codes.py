"""Tests for exit code helpers."""

import pytest

from todoist_cli.utils import exit_codes


def test_names_and_descriptions():
    assert exit_codes.get_exit_code_name(exit_codes.ERROR_NETWORK) == "ERROR_NETWORK"
    assert "Resource not found" == exit_codes.get_exit_code_description(
        exit_codes.ERROR_NOT_FOUND
    )


def test_unknown_code():
    assert exit_codes.get_exit_code_name(99) == "UNKNOWN(99)"
    assert exit_codes.get_exit_code_description(99) == "Unknown error"


@pytest.mark.parametrize(
    "status, expected",
    [
        (401, exit_codes.ERROR_AUTH_FAILURE),
        (403, exit_codes.ERROR_PERMISSION_DENIED),
        (404, exit_codes.ERROR_NOT_FOUND),
        (500, exit_codes.ERROR_GENERAL),
    ],
)
def test_exit_code_for_status(status, expected):
    assert exit_codes.exit_code_for_status(status) == expected
