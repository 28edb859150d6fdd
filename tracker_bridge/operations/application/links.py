"""Issue link operations."""

from functools import partial

from tracker_bridge.cache.domain.keys import (
    EntityType,
    IssueResource,
    entity_cache_key,
    issue_resource_cache_key,
)
from tracker_bridge.operations.application.base import KeyedOperation, PayloadOperation
from tracker_bridge.operations.domain.models import JsonObject, NewLink


class GetIssueLinksOperation(KeyedOperation[str, list[JsonObject]]):
    operation_name = "get_issue_links"

    async def execute(self, key: str) -> list[JsonObject]:
        return await self._with_cache(
            issue_resource_cache_key(key, IssueResource.LINKS),
            partial(self._http.get, f"/v3/issues/{key}/links"),
        )


class CreateLinkOperation(PayloadOperation[str, NewLink, JsonObject]):
    """Link the key's issue to ``payload.issue``.

    A link changes both ends, so both issues and both link lists are
    invalidated once the tracker accepts it.
    """

    operation_name = "create_link"

    async def execute(self, key: str, payload: NewLink) -> JsonObject:
        link = await self._with_retry(
            partial(
                self._http.post,
                f"/v3/issues/{key}/links",
                {"relationship": payload.relationship, "issue": payload.issue},
            )
        )
        await self._invalidate(
            entity_cache_key(EntityType.ISSUE, key),
            entity_cache_key(EntityType.ISSUE, payload.issue),
            issue_resource_cache_key(key, IssueResource.LINKS),
            issue_resource_cache_key(payload.issue, IssueResource.LINKS),
        )
        return link
