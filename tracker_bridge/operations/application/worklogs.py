"""Worklog operations."""

from functools import partial

from tracker_bridge.cache.domain.keys import IssueResource, issue_resource_cache_key
from tracker_bridge.operations.application.base import KeyedOperation, PayloadOperation
from tracker_bridge.operations.domain.models import JsonObject, NewWorklog


class GetWorklogsOperation(KeyedOperation[str, list[JsonObject]]):
    operation_name = "get_worklogs"

    async def execute(self, key: str) -> list[JsonObject]:
        return await self._with_cache(
            issue_resource_cache_key(key, IssueResource.WORKLOGS),
            partial(self._http.get, f"/v2/issues/{key}/worklog"),
        )


class AddWorklogOperation(PayloadOperation[str, NewWorklog, JsonObject]):
    """Log time on an issue. ``NewWorklog`` has already normalised the duration to ISO-8601."""

    operation_name = "add_worklog"

    async def execute(self, key: str, payload: NewWorklog) -> JsonObject:
        worklog = await self._with_retry(
            partial(self._http.post, f"/v2/issues/{key}/worklog", payload.to_body())
        )
        await self._invalidate(issue_resource_cache_key(key, IssueResource.WORKLOGS))
        return worklog
