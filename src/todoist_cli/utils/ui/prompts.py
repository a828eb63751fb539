"""Blocking terminal prompts used to fill in missing task fields.

Defines a Protocol so the resolver can be driven by any object with the
same three methods, and a Rich-backed implementation for the terminal.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from todoist_cli.errors import InvalidInput
from todoist_cli.utils.ui.console import get_console


@runtime_checkable
class Prompter(Protocol):
    """Interactive input capability."""

    def prompt_text(self, label: str) -> str:
        """Ask for a line of free text."""
        ...

    def prompt_choice(self, label: str, options: Sequence[str]) -> int:
        """Ask the user to pick one option; return its index."""
        ...

    def prompt_multi_choice(self, label: str, options: Sequence[str]) -> set[int]:
        """Ask the user to pick any number of options; return their indexes."""
        ...


class ConsolePrompter:
    """Prompter that reads from the terminal through Rich.

    Options are shown as a numbered list (starting at 1). Invalid answers
    are not re-asked: they raise :class:`InvalidInput`.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or get_console()

    def prompt_text(self, label: str) -> str:
        return Prompt.ask(label, console=self.console)

    def _show_options(self, options: Sequence[str]) -> None:
        for i, option in enumerate(options, 1):
            self.console.print(f"  [cyan]{i}.[/cyan] {escape(option)}")

    def _parse_number(self, raw: str, count: int) -> int:
        try:
            number = int(raw)
        except ValueError as e:
            raise InvalidInput(f"'{raw}' is not a number") from e
        if not 1 <= number <= count:
            raise InvalidInput(f"Choice {number} is out of range (1-{count})")
        return number - 1

    def prompt_choice(self, label: str, options: Sequence[str]) -> int:
        if not options:
            raise InvalidInput(f"Nothing to choose from for '{label}'")
        self.console.print(f"[bold]{label}[/bold]")
        self._show_options(options)
        answer = Prompt.ask("Pick a number", default="1", console=self.console)
        return self._parse_number(answer.strip(), len(options))

    def prompt_multi_choice(self, label: str, options: Sequence[str]) -> set[int]:
        if not options:
            return set()
        self.console.print(f"[bold]{label}[/bold]")
        self._show_options(options)
        answer = Prompt.ask(
            "Pick numbers separated by commas (empty for none)",
            default="",
            show_default=False,
            console=self.console,
        )
        parts = [p for p in re.split(r"[,\s]+", answer.strip()) if p]
        return {self._parse_number(p, len(options)) for p in parts}
