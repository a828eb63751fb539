"""Tests for TaskCreateBuilder and TaskCreateRequest."""

import pytest
from pydantic import ValidationError

from todoist_cli.errors import InvalidInput
from todoist_cli.models import TaskCreateBuilder, TaskCreateRequest, check_priority


def test_content_only_request_omits_unset_fields():
    request = TaskCreateBuilder("Buy milk").to_request()

    assert request.content == "Buy milk"
    assert request.to_wire() == {"content": "Buy milk", "labels": []}


def test_setters_chain_and_return_same_builder():
    builder = TaskCreateBuilder("Buy milk")

    assert builder.with_due("tomorrow") is builder
    assert builder.with_priority(2) is builder
    assert builder.with_project("1") is builder
    assert builder.with_labels(["errand"]) is builder


def test_last_write_wins():
    request = (
        TaskCreateBuilder("Buy milk")
        .with_labels(["a", "b"])
        .with_labels(["c"])
        .with_priority(1)
        .with_priority(4)
        .to_request()
    )

    assert request.labels == ["c"]
    assert request.priority == 4


def test_content_is_kept_exactly():
    request = TaskCreateBuilder("  Call mom ").to_request()

    assert request.content == "  Call mom "


def test_with_labels_copies_list():
    labels = ["a"]
    builder = TaskCreateBuilder("x").with_labels(labels)
    labels.append("b")

    assert builder.labels == ["a"]


@pytest.mark.parametrize("content", [None, "", "   "])
def test_empty_content_is_rejected(content):
    with pytest.raises(InvalidInput):
        TaskCreateBuilder(content).to_request()


@pytest.mark.parametrize("priority", [0, 5])
def test_priority_out_of_range_is_rejected(priority):
    with pytest.raises(InvalidInput) as exc_info:
        TaskCreateBuilder("x").with_priority(priority).to_request()

    assert "priority" in str(exc_info.value)


@pytest.mark.parametrize("priority", [1, 4])
def test_check_priority_accepts_bounds(priority):
    assert check_priority(priority) == priority


@pytest.mark.parametrize("priority", [0, 5, -1])
def test_check_priority_rejects_outside_bounds(priority):
    with pytest.raises(InvalidInput):
        check_priority(priority)

def test_builder_is_one_shot():
    builder = TaskCreateBuilder("x")
    builder.to_request()

    with pytest.raises(InvalidInput):
        builder.to_request()


def test_failed_build_does_not_consume_builder():
    builder = TaskCreateBuilder("x").with_priority(9)
    with pytest.raises(InvalidInput):
        builder.to_request()

    request = builder.with_priority(1).to_request()

    assert request.priority == 1


def test_request_is_frozen():
    request = TaskCreateBuilder("x").to_request()

    with pytest.raises(ValidationError):
        request.content = "y"


def test_request_wire_names():
    request = TaskCreateRequest(
        content="x", due_string="every day", priority=2, project_id="9", labels=["l"]
    )

    assert request.to_wire() == {
        "content": "x",
        "dueString": "every day",
        "priority": 2,
        "projectId": "9",
        "labels": ["l"],
    }
