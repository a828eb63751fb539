"""Task management commands."""

import typer

from todoist_cli.api import LabelsAPI, ProjectsAPI, TasksAPI, get_client
from todoist_cli.errors import InvalidInput
from todoist_cli.models import TaskCreateBuilder, TaskFilter, check_priority
from todoist_cli.services import TaskResolver, TaskService
from todoist_cli.utils.typer_helpers import SuggestingGroup
from todoist_cli.utils.ui.console import get_console
from todoist_cli.utils.ui.formatters import (
    format_info,
    format_raw,
    format_success,
    format_task_detail,
    format_tasks_table,
)
from todoist_cli.utils.ui.prompts import ConsolePrompter

from .decorators import command_wrapper

DEFAULT_FILTER = "today|overdue"

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")
console = get_console()


def get_prompter() -> ConsolePrompter:
    return ConsolePrompter(console)


@app.command("list")
@command_wrapper
async def list_tasks(
    filter_expr: str = typer.Option(
        DEFAULT_FILTER, "--filter", "-f", help="Filter tasks using Todoist query syntax"
    ),
    raw: bool = typer.Option(False, "--raw", "-r", help="Output comma separated rows"),
) -> None:
    """List tasks (today and overdue by default)."""
    async with get_client() as client:
        tasks = await TasksAPI(client).find_tasks(TaskFilter(filter_expr))
        projects = await ProjectsAPI(client).list_projects() if tasks else []

    project_names = {p.id: p.name for p in projects}
    if raw:
        format_raw(
            [t.id, project_names.get(t.project_id or "", ""), t.content, str(t.priority)]
            for t in tasks
        )
        return
    format_tasks_table(tasks, project_names)


@app.command("create")
@command_wrapper
async def create_task(
    content: str | None = typer.Argument(None, help="Content of the task"),
    due: str | None = typer.Option(
        None, "--due", "-d", help="Due date in natural language (e.g. 'tomorrow 5pm')"
    ),
    project: str | None = typer.Option(None, "--project", "-p", help="Project ID"),
    project_name: str | None = typer.Option(
        None, "--project-name", help="Project name (exact match)"
    ),
    labels: list[str] | None = typer.Option(
        None, "--label", "-l", help="Label name to add (repeatable)"
    ),
    priority: int | None = typer.Option(
        None, "--priority", help="Priority from 1 (normal) to 4 (urgent)"
    ),
) -> None:
    """Create a task, prompting for anything not given as an option."""
    if project and project_name:
        raise InvalidInput("Use either --project or --project-name, not both")
    if priority is not None:
        check_priority(priority)

    builder = TaskCreateBuilder(content)
    if due is not None:
        builder.with_due(due)
    if priority is not None:
        builder.with_priority(priority)
    if project is not None:
        builder.with_project(project)
    if labels:
        builder.with_labels(labels)

    async with get_client() as client:
        projects_api = ProjectsAPI(client)
        if project_name is not None:
            found = await projects_api.find_project_by_name(project_name)
            builder.with_project(found.id)

        resolver = TaskResolver(projects_api, LabelsAPI(client), get_prompter())
        task = await TaskService(TasksAPI(client), resolver).create_task(builder)

    format_success(f"Task created: {task.content}")
    console.print(f"[dim]Task ID: {task.id}[/dim]")


@app.command("done")
@command_wrapper
async def close_task(
    task_id: str | None = typer.Argument(None, help="ID of the task (pick from today's tasks if omitted)"),
) -> None:
    """Mark a task as done."""
    async with get_client() as client:
        tasks_api = TasksAPI(client)
        if task_id is None:
            tasks = await tasks_api.find_tasks(TaskFilter(DEFAULT_FILTER))
            if not tasks:
                format_info("No tasks due today or overdue")
                return
            index = get_prompter().prompt_choice("Task", [t.content for t in tasks])
            task_id = tasks[index].id

        await tasks_api.close_task(task_id)

    format_success("Task done")


@app.command("view")
@command_wrapper
async def view_task(
    task_id: str = typer.Argument(..., help="ID of the task"),
) -> None:
    """View a task by ID."""
    async with get_client() as client:
        task = await TasksAPI(client).view_task(task_id)
        project = None
        if task.project_id:
            project = await ProjectsAPI(client).view_project(task.project_id)

    format_task_detail(task, project)
