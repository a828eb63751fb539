"""Projects API endpoints."""

from todoist_cli.api.client import APIClient, decode_model, decode_models
from todoist_cli.errors import NotFound
from todoist_cli.models import Project


class ProjectsAPI:
    """Projects API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_projects(self) -> list[Project]:
        """List all projects in server order."""
        data = await self.client.get("/projects")
        return decode_models(Project, data)

    async def view_project(self, project_id: str) -> Project:
        """Get a specific project by ID."""
        data = await self.client.get(f"/projects/{project_id}")
        return decode_model(Project, data)

    async def find_project_by_name(self, name: str) -> Project:
        """Return the first project whose name is exactly ``name``.

        Matching is case-sensitive. Duplicate names resolve to the first one
        in listing order.
        """
        for project in await self.list_projects():
            if project.name == name:
                return project
        raise NotFound(f"No project named '{name}'")
