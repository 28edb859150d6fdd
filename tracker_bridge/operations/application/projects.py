"""Project operations."""

from functools import partial

from tracker_bridge.cache.domain.keys import EntityType, entity_cache_key
from tracker_bridge.operations.application.base import KeyedOperation
from tracker_bridge.operations.domain.models import JsonObject


class GetProjectOperation(KeyedOperation[str, JsonObject]):
    operation_name = "get_project"

    async def execute(self, key: str) -> JsonObject:
        return await self._with_cache(
            entity_cache_key(EntityType.PROJECT, key),
            partial(self._http.get, f"/v2/projects/{key}"),
        )
