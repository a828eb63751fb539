"""Todoist REST API client."""

from .client import APIClient, get_client
from .labels import LabelsAPI
from .projects import ProjectsAPI
from .tasks import TasksAPI

__all__ = ["APIClient", "LabelsAPI", "ProjectsAPI", "TasksAPI", "get_client"]
