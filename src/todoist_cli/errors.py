"""Errors raised by the Todoist CLI core.

Every error carries the exit code the command layer should terminate with.
"""

from __future__ import annotations

from todoist_cli.utils import exit_codes


class AppError(Exception):
    """Application error with an exit code."""

    exit_code: int = exit_codes.ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(AppError):
    """The configuration file is missing or unusable."""

    exit_code = exit_codes.ERROR_AUTH_FAILURE


class InvalidInput(AppError):
    """User supplied a value the client can reject before any request."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class TransportError(AppError):
    """The request never produced a response (DNS, connect, TLS, timeout)."""

    exit_code = exit_codes.ERROR_NETWORK


class RequestFailed(AppError):
    """A content-less request came back with a non-success status."""

    def __init__(self, status: int):
        super().__init__(
            f"the request failed with status code {status}",
            exit_code=exit_codes.exit_code_for_status(status),
        )
        self.status = status


class DecodeError(AppError):
    """A response body could not be decoded into the expected shape."""

    exit_code = exit_codes.ERROR_NETWORK

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class NotFound(AppError):
    """A lookup by name matched nothing."""

    exit_code = exit_codes.ERROR_NOT_FOUND
