"""Tests for the wire models."""

import pytest
from pydantic import ValidationError

from todoist_cli.models import Label, Project, Task, TaskFilter, ViewStyle


class TestTask:
    def test_decodes_camel_case_fields(self):
        task = Task.model_validate(
            {
                "id": "7",
                "content": "Write report",
                "projectId": "2",
                "isCompleted": True,
                "createdAt": "2024-01-01T10:00:00Z",
                "commentCount": 3,
                "labels": ["work", "urgent"],
            }
        )

        assert task.project_id == "2"
        assert task.is_completed is True
        assert task.created_at == "2024-01-01T10:00:00Z"
        assert task.comment_count == 3
        assert task.labels == ["work", "urgent"]

    def test_decodes_snake_case_fields(self):
        task = Task.model_validate({"id": "7", "content": "x", "project_id": "2"})

        assert task.project_id == "2"

    def test_numeric_ids_become_strings(self):
        task = Task.model_validate({"id": 7, "content": "x", "projectId": 2})

        assert task.id == "7"
        assert task.project_id == "2"

    def test_references_keep_their_kind(self):
        task = Task.model_validate(
            {"id": "1", "content": "x", "assigneeId": 42, "sectionId": "abc"}
        )

        assert task.assignee_id == 42
        assert task.section_id == "abc"
        assert task.assigner_id is None

    def test_unknown_fields_are_ignored(self):
        task = Task.model_validate({"id": "1", "content": "x", "somethingNew": {"a": 1}})

        assert task.content == "x"

    def test_priority_out_of_range_is_rejected(self):
        with pytest.raises(ValidationError):
            Task.model_validate({"id": "1", "content": "x", "priority": 9})


class TestProject:
    def test_defaults_for_sparse_payload(self):
        project = Project.model_validate({"id": "1", "name": "Inbox"})

        assert project.view_style is ViewStyle.LIST
        assert project.parent_id is None
        assert not project.is_inbox_project
        assert str(project) == "Inbox"

    def test_parent_reference(self):
        project = Project.model_validate({"id": "5", "name": "Sub", "parentId": "1"})

        assert project.parent_id == "1"


def test_label_decodes():
    label = Label.model_validate({"id": "1", "name": "home", "order": 2})

    assert label.name == "home"
    assert label.order == 2


class TestTaskFilter:
    def test_query_keeps_expression_unescaped(self):
        assert TaskFilter("today|overdue").to_query() == "?filter=today|overdue"

    def test_query_keeps_spaces_and_symbols(self):
        assert TaskFilter("(today | overdue) & #Work").to_query() == (
            "?filter=(today | overdue) & #Work"
        )

    def test_params_carry_expression_as_is(self):
        assert TaskFilter("today & p1").to_params() == {"filter": "today & p1"}
