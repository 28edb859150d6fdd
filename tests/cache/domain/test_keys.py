"""Tests for cache key derivation."""

from tracker_bridge.cache.domain.keys import (
    EntityType,
    IssueResource,
    entity_cache_key,
    issue_resource_cache_key,
    task_cache_key,
)


class TestCacheKeys:
    def test_entity_key(self) -> None:
        assert entity_cache_key(EntityType.ISSUE, "QUEUE-1") == "issue:QUEUE-1"
        assert entity_cache_key(EntityType.QUEUE, "QUEUE") == "queue:QUEUE"

    def test_issue_resource_key(self) -> None:
        assert (
            issue_resource_cache_key("QUEUE-1", IssueResource.LINKS)
            == "issue:QUEUE-1/links"
        )

    def test_task_key(self) -> None:
        assert task_cache_key("inbox", "t1") == "task:inbox:t1"
