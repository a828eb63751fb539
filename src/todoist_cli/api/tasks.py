"""Tasks API endpoints."""

from typing import Optional

from todoist_cli.api.client import APIClient, decode_model, decode_models
from todoist_cli.models import Task, TaskCreateRequest, TaskFilter
from todoist_cli.utils.logger import get_logger


class TasksAPI:
    """Tasks API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def find_tasks(self, task_filter: Optional[TaskFilter] = None) -> list[Task]:
        """List active tasks, optionally narrowed by a filter expression.

        The server is expected to return the complete list in one response.
        """
        if task_filter is None:
            data = await self.client.get("/tasks")
        else:
            get_logger().debug("finding tasks%s", task_filter.to_query())
            data = await self.client.get("/tasks", params=task_filter.to_params())
        return decode_models(Task, data)

    async def create_task(self, request: TaskCreateRequest) -> Task:
        """Create a task from an already validated request."""
        data = await self.client.post("/tasks", request.to_wire())
        return decode_model(Task, data)

    async def close_task(self, task_id: str) -> None:
        """Mark a task as completed."""
        await self.client.post(f"/tasks/{task_id}/close", decode=False)

    async def view_task(self, task_id: str) -> Task:
        """Get a specific task by ID."""
        data = await self.client.get(f"/tasks/{task_id}")
        return decode_model(Task, data)
