"""Shared test fixtures and configuration.

Keeps tests away from the real log directory, config file and network.
"""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Callable, Sequence
from unittest.mock import patch

import httpx
import pytest

from todoist_cli.api.client import APIClient


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send log output to a temporary directory and reset the singleton."""
    import todoist_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("todoist_cli").handlers.clear()
    with patch("todoist_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    app_logger = logging.getLogger("todoist_cli")
    for handler in app_logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
    app_logger.handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_api_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], APIClient]:
    """Build an APIClient whose requests are answered by *handler*."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> APIClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return APIClient("test-token", base_url="https://api.test/rest/v2", http_client=http_client)

    return _make


# ---------------------------------------------------------------------------
# Prompt double
# ---------------------------------------------------------------------------


class FakePrompter:
    """Scripted stand-in for the terminal prompter that records every call."""

    def __init__(
        self,
        texts: dict[str, str] | None = None,
        choice: int = 0,
        multi: set[int] | None = None,
    ):
        self.texts = dict(texts or {})
        self.choice = choice
        self.multi = set(multi or ())
        self.calls: list[tuple] = []

    def prompt_text(self, label: str) -> str:
        self.calls.append(("text", label))
        return self.texts[label]

    def prompt_choice(self, label: str, options: Sequence[str]) -> int:
        self.calls.append(("choice", label, list(options)))
        return self.choice

    def prompt_multi_choice(self, label: str, options: Sequence[str]) -> set[int]:
        self.calls.append(("multi", label, list(options)))
        return set(self.multi)


@pytest.fixture()
def make_prompter() -> type[FakePrompter]:
    return FakePrompter
