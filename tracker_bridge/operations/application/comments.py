"""Issue comment operations."""

from functools import partial

from tracker_bridge.cache.domain.keys import IssueResource, issue_resource_cache_key
from tracker_bridge.operations.application.base import KeyedOperation, PayloadOperation
from tracker_bridge.operations.domain.models import JsonObject, NewComment


class GetCommentsOperation(KeyedOperation[str, list[JsonObject]]):
    operation_name = "get_comments"

    async def execute(self, key: str) -> list[JsonObject]:
        return await self._with_cache(
            issue_resource_cache_key(key, IssueResource.COMMENTS),
            partial(self._http.get, f"/v3/issues/{key}/comments"),
        )


class AddCommentOperation(PayloadOperation[str, NewComment, JsonObject]):
    operation_name = "add_comment"

    async def execute(self, key: str, payload: NewComment) -> JsonObject:
        comment = await self._with_retry(
            partial(
                self._http.post, f"/v3/issues/{key}/comments", {"text": payload.text}
            )
        )
        await self._invalidate(issue_resource_cache_key(key, IssueResource.COMMENTS))
        return comment
