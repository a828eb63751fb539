"""
Exit codes for the Todoist CLI.

Scripts wrapping the CLI can use these codes to tell what went wrong
without parsing the error message.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Authentication failure (missing config, rejected token)
ERROR_AUTH_FAILURE = 3

# Network or API error (server unreachable, unexpected response)
ERROR_NETWORK = 4

# Resource not found
ERROR_NOT_FOUND = 5

# Permission denied
ERROR_PERMISSION_DENIED = 6


_NAMES = {
    SUCCESS: "SUCCESS",
    ERROR_GENERAL: "ERROR_GENERAL",
    ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
    ERROR_NETWORK: "ERROR_NETWORK",
    ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
}

_DESCRIPTIONS = {
    SUCCESS: "Command executed successfully",
    ERROR_GENERAL: "A general error occurred",
    ERROR_INVALID_ARGS: "Invalid arguments or validation error",
    ERROR_AUTH_FAILURE: "Authentication failure - check your API token",
    ERROR_NETWORK: "Network or API error - check connection",
    ERROR_NOT_FOUND: "Resource not found",
    ERROR_PERMISSION_DENIED: "Permission denied",
}


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    return _NAMES.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    return _DESCRIPTIONS.get(code, "Unknown error")


def exit_code_for_status(status: int) -> int:
    """Map an HTTP status code onto the closest exit code."""
    if status == 401:
        return ERROR_AUTH_FAILURE
    if status == 403:
        return ERROR_PERMISSION_DENIED
    if status == 404:
        return ERROR_NOT_FOUND
    return ERROR_GENERAL
