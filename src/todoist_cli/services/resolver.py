"""Interactive resolution of task fields left unset on the command line.

Each field is handled by its own step. Steps run in a fixed order and
each one either leaves a caller-supplied value alone or fills the gap
with exactly one prompt or one lookup followed by a prompt.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from todoist_cli.api.labels import LabelsAPI
from todoist_cli.api.projects import ProjectsAPI
from todoist_cli.errors import InvalidInput, NotFound
from todoist_cli.models import TaskCreateBuilder, check_priority
from todoist_cli.utils.logger import get_logger
from todoist_cli.utils.ui.prompts import Prompter

ResolveStep = Callable[[TaskCreateBuilder], Awaitable[None]]


class TaskResolver:
    """Fills missing task fields by prompting and by listing resources.

    Labels offered for selection are all account labels; they are not
    narrowed to the chosen project.
    """

    def __init__(self, projects_api: ProjectsAPI, labels_api: LabelsAPI, prompter: Prompter):
        self.projects_api = projects_api
        self.labels_api = labels_api
        self.prompter = prompter

    @property
    def steps(self) -> tuple[ResolveStep, ...]:
        return (
            self.resolve_content,
            self.resolve_project,
            self.resolve_due,
            self.resolve_labels,
            self.resolve_priority,
        )

    async def resolve(self, builder: TaskCreateBuilder) -> TaskCreateBuilder:
        """Run every step in order; any failure aborts the rest."""
        for step in self.steps:
            await step(builder)
        return builder

    async def resolve_content(self, builder: TaskCreateBuilder) -> None:
        if builder.content is not None:
            return
        builder.with_content(self.prompter.prompt_text("Task content"))

    async def resolve_project(self, builder: TaskCreateBuilder) -> None:
        if builder.project_id is not None:
            return
        projects = await self.projects_api.list_projects()
        if not projects:
            raise NotFound("No projects available to add the task to")
        index = self.prompter.prompt_choice("Project", [p.name for p in projects])
        if not 0 <= index < len(projects):
            raise InvalidInput(f"No project at position {index + 1}")
        project = projects[index]
        get_logger().debug("project resolved interactively: %s", project.id)
        builder.with_project(project.id)

    async def resolve_due(self, builder: TaskCreateBuilder) -> None:
        if builder.due is not None:
            return
        builder.with_due(self.prompter.prompt_text("Due date"))

    async def resolve_labels(self, builder: TaskCreateBuilder) -> None:
        if builder.labels:
            return
        labels = await self.labels_api.list_labels()
        if not labels:
            builder.with_labels([])
            return
        chosen = self.prompter.prompt_multi_choice("Labels", [l.name for l in labels])
        out_of_range = sorted(i for i in chosen if not 0 <= i < len(labels))
        if out_of_range:
            raise InvalidInput(f"No label at position {out_of_range[0] + 1}")
        builder.with_labels([labels[i].name for i in sorted(chosen)])

    async def resolve_priority(self, builder: TaskCreateBuilder) -> None:
        if builder.priority is not None:
            return
        answer = self.prompter.prompt_text("Priority")
        try:
            priority = int(answer.strip())
        except ValueError as e:
            raise InvalidInput(f"Priority must be a number, got '{answer}'") from e
        builder.with_priority(check_priority(priority))
