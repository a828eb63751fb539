"""Command-line client for Todoist."""

__version__ = "0.3.0"
