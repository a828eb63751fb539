"""Main entry point for the Todoist CLI."""

import typer

from todoist_cli import __version__
from todoist_cli.commands import config, labels, projects, tasks
from todoist_cli.utils.typer_helpers import SuggestingGroup
from todoist_cli.utils.ui.console import get_console

app = typer.Typer(
    name="todoist",
    cls=SuggestingGroup,
    help="Manage Todoist tasks, projects and labels from the terminal",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(tasks.app, name="tasks", help="Work with tasks")
app.add_typer(projects.app, name="projects", help="Work with projects")
app.add_typer(labels.app, name="labels", help="Work with labels")
app.add_typer(config.app, name="config", help="Configuration commands")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todoist-cli[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
