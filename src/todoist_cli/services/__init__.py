"""Service layer for the Todoist CLI."""

from .resolver import TaskResolver
from .task_service import TaskService

__all__ = ["TaskResolver", "TaskService"]
