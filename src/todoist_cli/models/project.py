"""Project data model."""

from enum import Enum

from .base import WireModel


class ViewStyle(str, Enum):
    """How a project is displayed in the web app."""

    LIST = "list"
    BOARD = "board"
    CALENDAR = "calendar"


class Project(WireModel):
    """A project. Projects form a tree through ``parent_id``."""

    id: str
    name: str
    comment_count: int = 0
    order: int = 0
    color: str = "charcoal"
    is_shared: bool = False
    is_favorite: bool = False
    parent_id: str | None = None
    is_inbox_project: bool = False
    is_team_inbox: bool = False
    view_style: ViewStyle = ViewStyle.LIST
    url: str = ""

    def __str__(self) -> str:
        return self.name
