"""Labels API endpoints."""

from todoist_cli.api.client import APIClient, decode_models
from todoist_cli.models import Label


class LabelsAPI:
    """Labels API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_labels(self) -> list[Label]:
        """List all personal labels."""
        data = await self.client.get("/labels")
        return decode_models(Label, data)
