"""Project commands."""

import typer

from todoist_cli.api import ProjectsAPI, get_client
from todoist_cli.errors import InvalidInput
from todoist_cli.utils.typer_helpers import SuggestingGroup
from todoist_cli.utils.ui.formatters import format_projects

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Project commands")


@app.command("list")
@command_wrapper
async def list_projects() -> None:
    """List projects."""
    async with get_client() as client:
        projects = await ProjectsAPI(client).list_projects()
    format_projects(projects)


@app.command("view")
@command_wrapper
async def view_project(
    project_id: str | None = typer.Argument(None, help="Project ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="Look the project up by exact name"),
) -> None:
    """View a project by ID or name."""
    if (project_id is None) == (name is None):
        raise InvalidInput("Give either a project ID or --name")

    async with get_client() as client:
        projects_api = ProjectsAPI(client)
        if name is not None:
            project = await projects_api.find_project_by_name(name)
        else:
            project = await projects_api.view_project(project_id)
    format_projects([project])
