"""Checklist operations."""

from functools import partial
from typing import Any

from tracker_bridge.cache.domain.keys import IssueResource, issue_resource_cache_key
from tracker_bridge.operations.application.base import KeyedOperation, PayloadOperation
from tracker_bridge.operations.domain.models import JsonObject, NewChecklistItem


class GetChecklistOperation(KeyedOperation[str, list[JsonObject]]):
    """Fetch an issue's checklist. Issues without one yield an empty list."""

    operation_name = "get_checklist"

    async def execute(self, key: str) -> list[JsonObject]:
        return await self._with_cache(
            issue_resource_cache_key(key, IssueResource.CHECKLIST),
            partial(self._fetch, key),
        )

    async def _fetch(self, key: str) -> list[JsonObject]:
        items: Any = await self._http.get(f"/v2/issues/{key}/checklistItems")
        return items if isinstance(items, list) else []


class AddChecklistItemOperation(PayloadOperation[str, NewChecklistItem, JsonObject]):
    operation_name = "add_checklist_item"

    async def execute(self, key: str, payload: NewChecklistItem) -> JsonObject:
        item = await self._with_retry(
            partial(
                self._http.post, f"/v2/issues/{key}/checklistItems", payload.to_body()
            )
        )
        await self._invalidate(issue_resource_cache_key(key, IssueResource.CHECKLIST))
        return item
