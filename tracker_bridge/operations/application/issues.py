"""Issue operations: fetch, create and update."""

from functools import partial

from tracker_bridge.cache.domain.keys import EntityType, entity_cache_key
from tracker_bridge.operations.application.base import KeyedOperation, PayloadOperation
from tracker_bridge.operations.domain.models import IssueUpdate, JsonObject, NewIssue


class GetIssuesOperation(KeyedOperation[str, JsonObject]):
    """Fetch issues by key, e.g. ``QUEUE-123``."""

    operation_name = "get_issues"

    async def execute(self, key: str) -> JsonObject:
        return await self._with_cache(
            entity_cache_key(EntityType.ISSUE, key),
            partial(self._http.get, f"/v3/issues/{key}"),
        )


class CreateIssueOperation(PayloadOperation[str, NewIssue, JsonObject]):
    """Create an issue in the queue given as the key.

    The created issue is cached under its new key so a follow-up fetch is free.
    """

    operation_name = "create_issue"

    async def execute(self, key: str, payload: NewIssue) -> JsonObject:
        created = await self._with_retry(
            partial(self._http.post, "/v3/issues/", payload.to_body(queue=key))
        )
        if isinstance(created, dict) and created.get("key"):
            await self._store(entity_cache_key(EntityType.ISSUE, created["key"]), created)
        return created


class UpdateIssueOperation(PayloadOperation[str, IssueUpdate, JsonObject]):
    operation_name = "update_issue"

    async def execute(self, key: str, payload: IssueUpdate) -> JsonObject:
        updated = await self._with_retry(
            partial(self._http.patch, f"/v3/issues/{key}", payload.fields)
        )
        await self._invalidate(entity_cache_key(EntityType.ISSUE, key))
        return updated
