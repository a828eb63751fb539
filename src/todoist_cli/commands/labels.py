"""Label commands."""

import typer

from todoist_cli.api import LabelsAPI, get_client
from todoist_cli.utils.typer_helpers import SuggestingGroup
from todoist_cli.utils.ui.formatters import format_labels

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Label commands")


@app.command("list")
@command_wrapper
async def list_labels() -> None:
    """List all labels."""
    async with get_client() as client:
        labels = await LabelsAPI(client).list_labels()
    format_labels(labels)
