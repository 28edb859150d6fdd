"""Cache key derivation for tracker entities and their sub-resources."""

from enum import StrEnum


class EntityType(StrEnum):
    ISSUE = "issue"
    PROJECT = "project"
    QUEUE = "queue"
    USER = "user"
    BOARD = "board"
    TASK = "task"


class IssueResource(StrEnum):
    COMMENTS = "comments"
    LINKS = "links"
    WORKLOGS = "worklogs"
    CHECKLIST = "checklist"


def entity_cache_key(entity_type: EntityType, entity_id: str) -> str:
    """Return ``"<type>:<id>"``, e.g. ``"issue:QUEUE-1"``."""
    return f"{entity_type}:{entity_id}"


def issue_resource_cache_key(issue_key: str, resource: IssueResource) -> str:
    """Return the key of a collection hanging off an issue, e.g. ``"issue:QUEUE-1/links"``."""
    return f"{entity_cache_key(EntityType.ISSUE, issue_key)}/{resource}"


def task_cache_key(project_id: str, task_id: str) -> str:
    return f"{EntityType.TASK}:{project_id}:{task_id}"
