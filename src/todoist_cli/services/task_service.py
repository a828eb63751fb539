"""Task service - orchestrates task creation.

Sits between the commands and the API: resolves the missing fields of a
request, then submits it.
"""

from __future__ import annotations

from todoist_cli.api.tasks import TasksAPI
from todoist_cli.models import Task, TaskCreateBuilder
from todoist_cli.services.resolver import TaskResolver
from todoist_cli.utils.logger import get_logger


class TaskService:
    """Service for creating tasks with interactive gap filling."""

    def __init__(self, tasks_api: TasksAPI, resolver: TaskResolver):
        """Initialize the task service.

        Args:
            tasks_api: API used to submit the finished request
            resolver: Fills fields the caller left unset
        """
        self.tasks_api = tasks_api
        self.resolver = resolver

    async def create_task(self, builder: TaskCreateBuilder) -> Task:
        """Resolve, validate and submit a task.

        Creation is the last step, so a failure while gathering input never
        leaves a task behind on the server.

        Args:
            builder: Builder pre-populated from command-line flags

        Returns:
            The created Task, with its server-assigned id
        """
        await self.resolver.resolve(builder)
        request = builder.to_request()
        task = await self.tasks_api.create_task(request)
        get_logger().info("task created: %s", task.id)
        return task
