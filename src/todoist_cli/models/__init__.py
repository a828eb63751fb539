"""Data models for the Todoist REST API."""

from .base import Ref, WireModel
from .label import Label
from .project import Project, ViewStyle
from .task import Due, Task, TaskFilter
from .task_create import TaskCreateBuilder, TaskCreateRequest, check_priority

__all__ = [
    "Due",
    "Label",
    "Project",
    "Ref",
    "Task",
    "TaskCreateBuilder",
    "TaskCreateRequest",
    "TaskFilter",
    "ViewStyle",
    "WireModel",
    "check_priority",
]
