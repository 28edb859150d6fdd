"""Tests for operation input models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tracker_bridge.operations.domain.models import (
    IssueUpdate,
    NewChecklistItem,
    NewLink,
    NewWorklog,
    TaskRef,
)


class TestNewLink:
    def test_rejects_unknown_relationship(self) -> None:
        with pytest.raises(ValidationError):
            NewLink(relationship="blocks everything", issue="B")  # type: ignore[arg-type]


class TestNewWorklog:
    def test_invalid_duration_rejected_before_any_call(self) -> None:
        with pytest.raises(ValidationError):
            NewWorklog(start=datetime.now(tz=timezone.utc), duration="a while")

    def test_duration_normalised(self) -> None:
        worklog = NewWorklog(start=datetime.now(tz=timezone.utc), duration="45m")
        assert worklog.duration == "PT45M"


class TestOtherModels:
    def test_issue_update_requires_fields(self) -> None:
        with pytest.raises(ValidationError):
            IssueUpdate(fields={})

    def test_checklist_item_body_serialises_deadline(self) -> None:
        item = NewChecklistItem(
            text="ship", deadline=datetime(2026, 3, 1, tzinfo=timezone.utc)
        )
        assert item.to_body() == {"text": "ship", "deadline": "2026-03-01T00:00:00Z"}

    def test_task_ref_string_form(self) -> None:
        assert str(TaskRef(project_id="inbox", task_id="t1")) == "inbox/t1"
