"""Task creation request and its builder."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, ValidationError

from todoist_cli.errors import InvalidInput

from .base import WireModel

MIN_PRIORITY = 1
MAX_PRIORITY = 4


def check_priority(priority: int) -> int:
    """Reject a priority outside 1 (normal) to 4 (urgent)."""
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise InvalidInput(
            f"priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}, got {priority}"
        )
    return priority


class TaskCreateRequest(WireModel):
    """Fields the server accepts when creating a task.

    Unset optional fields are left out of the body so the server applies
    its own defaults.
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(min_length=1)
    due_string: str | None = None
    priority: int | None = Field(default=None, ge=MIN_PRIORITY, le=MAX_PRIORITY)
    project_id: str | None = None
    labels: list[str] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON body for ``POST /tasks``."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TaskCreateBuilder:
    """Accumulates task fields before a single create call.

    Setters return the builder so calls can be chained::

        TaskCreateBuilder("Buy milk").with_due("tomorrow").with_priority(2)

    Calling a setter twice replaces the earlier value. The builder is
    consumed by :meth:`to_request`.
    """

    def __init__(self, content: str | None):
        self._content = content
        self._due: str | None = None
        self._priority: int | None = None
        self._project_id: str | None = None
        self._labels: list[str] = []
        self._consumed = False

    @property
    def content(self) -> str | None:
        return self._content

    @property
    def due(self) -> str | None:
        return self._due

    @property
    def priority(self) -> int | None:
        return self._priority

    @property
    def project_id(self) -> str | None:
        return self._project_id

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    def with_content(self, content: str) -> TaskCreateBuilder:
        self._content = content
        return self

    def with_due(self, due: str) -> TaskCreateBuilder:
        self._due = due
        return self

    def with_priority(self, priority: int) -> TaskCreateBuilder:
        self._priority = priority
        return self

    def with_project(self, project_id: str) -> TaskCreateBuilder:
        self._project_id = project_id
        return self

    def with_labels(self, labels: list[str]) -> TaskCreateBuilder:
        self._labels = list(labels)
        return self

    def to_request(self) -> TaskCreateRequest:
        """Validate the accumulated fields and freeze them into a request."""
        if self._consumed:
            raise InvalidInput("Task request was already built")
        if not self._content or not self._content.strip():
            raise InvalidInput("Task content must not be empty")
        try:
            request = TaskCreateRequest(
                content=self._content,
                due_string=self._due,
                priority=self._priority,
                project_id=self._project_id,
                labels=self._labels,
            )
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidInput(f"Invalid task: {problems}") from e
        self._consumed = True
        return request
