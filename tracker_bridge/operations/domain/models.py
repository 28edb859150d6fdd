"""Input models for tracker operations."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from tracker_bridge.operations.domain.duration import normalize_duration

type JsonObject = dict[str, Any]

type LinkRelationship = Literal[
    "relates",
    "is duplicated by",
    "duplicates",
    "is subtask of",
    "has subtasks",
    "depends on",
    "is dependent by",
    "is epic of",
    "has epic",
]


class NewIssue(BaseModel, frozen=True):
    summary: str = Field(min_length=1)
    description: str | None = None
    type: str | None = None
    priority: str | None = None
    assignee: str | None = None
    parent: str | None = None
    # Arbitrary tracker fields (local fields, tags, ...), merged into the body.
    fields: JsonObject = Field(default_factory=dict)

    def to_body(self, queue: str) -> JsonObject:
        body: JsonObject = {"queue": queue, **self.fields}
        body.update(self.model_dump(exclude_none=True, exclude={"fields"}))
        return body


class IssueUpdate(BaseModel, frozen=True):
    fields: JsonObject = Field(min_length=1)


class NewComment(BaseModel, frozen=True):
    text: str = Field(min_length=1)


class NewLink(BaseModel, frozen=True):
    relationship: LinkRelationship
    issue: str = Field(min_length=1)


class NewWorklog(BaseModel, frozen=True):
    start: datetime
    duration: str
    comment: str | None = None

    @field_validator("duration")
    @classmethod
    def _to_iso(cls, value: str) -> str:
        return normalize_duration(value)

    def to_body(self) -> JsonObject:
        body: JsonObject = {"start": self.start.isoformat(), "duration": self.duration}
        if self.comment is not None:
            body["comment"] = self.comment
        return body


class NewChecklistItem(BaseModel, frozen=True):
    text: str = Field(min_length=1)
    checked: bool | None = None
    assignee: str | None = None
    deadline: datetime | None = None

    def to_body(self) -> JsonObject:
        return self.model_dump(mode="json", exclude_none=True)


class TaskRef(BaseModel, frozen=True):
    """Identity of a task in a project-scoped task list."""

    project_id: str = Field(min_length=1)
    task_id: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.project_id}/{self.task_id}"
