"""Output formatters for tasks, projects and labels."""

from collections.abc import Iterable, Sequence

from rich.markup import escape
from rich.table import Table

from todoist_cli.models import Label, Project, Task
from todoist_cli.utils.ui.console import get_console

# API priority 4 is what the apps display as "p1"
PRIORITY_COLORS = {4: "red", 3: "yellow", 2: "blue", 1: "white"}


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")


def format_priority(priority: int) -> str:
    color = PRIORITY_COLORS.get(priority, "white")
    return f"[{color}]{priority}[/{color}]"


def format_raw(rows: Iterable[Sequence[str]]) -> None:
    """Print rows as comma separated values, without markup."""
    for row in rows:
        print(",".join(row))


def format_tasks_table(tasks: list[Task], project_names: dict[str, str]) -> None:
    """Render tasks as a table with their project names."""
    console = get_console()
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Project", style="magenta")
    table.add_column("Task name")
    table.add_column("Priority", justify="center")
    for task in tasks:
        table.add_row(
            task.id,
            escape(project_names.get(task.project_id or "", "")),
            escape(task.content),
            format_priority(task.priority),
        )
    console.print(table)


def format_task_detail(task: Task, project: Project | None) -> None:
    """Show a single task."""
    console = get_console()
    console.print(f"Task : [green]{escape(task.content)}[/green]")
    if task.description:
        console.print(f"Description : {escape(task.description)}")
    if task.due is not None:
        due = task.due.datetime or task.due.date
        recurring = " (recurring)" if task.due.is_recurring else ""
        console.print(f"Due date : [red]{due}[/red]{recurring}")
    console.print(f"Priority : {format_priority(task.priority)}")
    if project is not None:
        console.print(f"Project : [green]{escape(project.name)}[/green]")
    labels = " ".join(f"[magenta]{escape(name)}[/magenta]" for name in task.labels)
    console.print(f"Labels : {labels}")
    if task.url:
        console.print(f"[dim]{task.url}[/dim]")


def format_projects(projects: list[Project]) -> None:
    console = get_console()
    if not projects:
        console.print("[yellow]No projects found[/yellow]")
        return
    for project in projects:
        marker = " [yellow]*[/yellow]" if project.is_favorite else ""
        console.print(f"{project.id} | {escape(project.name)}{marker}")


def format_labels(labels: list[Label]) -> None:
    console = get_console()
    if not labels:
        console.print("[yellow]No labels found[/yellow]")
        return
    for label in labels:
        console.print(f"{label.id} | {escape(label.name)} [dim]({label.color})[/dim]")
