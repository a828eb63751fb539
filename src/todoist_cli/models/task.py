"""Task data models."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from .base import Ref, WireModel


class Due(WireModel):
    """Due date object attached to a task."""

    string: str = ""
    date: str
    is_recurring: bool = False
    datetime: str | None = None
    timezone: str | None = None


class Task(WireModel):
    """A task as returned by the API.

    Attributes:
        id: Server-assigned identifier, immutable once created
        content: Task title
        labels: Label names (not ids)
        priority: 1 (normal) to 4 (urgent)
        due: Optional due specification
    """

    id: str
    content: str
    description: str = ""
    is_completed: bool = False
    project_id: str | None = None
    section_id: Ref = None
    parent_id: str | None = None
    order: int = 0
    priority: int = Field(default=1, ge=1, le=4)
    creator_id: Ref = None
    assigner_id: Ref = None
    assignee_id: Ref = None
    labels: list[str] = Field(default_factory=list)
    comment_count: int = 0
    due: Due | None = None
    created_at: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class TaskFilter:
    """A server-side filter expression such as ``today|overdue``.

    The expression is passed through untouched; the server owns the grammar.
    """

    expression: str

    def to_query(self) -> str:
        return f"?filter={self.expression}"

    def to_params(self) -> dict[str, str]:
        """Query parameters for the transport, which encodes them."""
        return {"filter": self.expression}
