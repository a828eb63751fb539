"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from todoist_cli.utils.ui.console import get_console
from todoist_cli.utils.ui.formatters import format_error


def suggest_commands(attempted: str, commands: list[str]) -> list[str]:
    """Known command names close enough to ``attempted`` to be a typo of it."""
    return get_close_matches(attempted, commands, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Command group that answers an unknown command with close matches."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = suggest_commands(args[0], list(self.commands)) if args else []
            if not suggestions:
                raise
            console = get_console()
            format_error(f'unknown command "{args[0]}" for "{ctx.command_path}"')
            console.print(f"[yellow]Did you mean:[/yellow] {', '.join(suggestions)}")
            console.print(f"[dim]Run '{ctx.command_path} --help' to see every command.[/dim]")
            raise typer.Exit(1) from e
