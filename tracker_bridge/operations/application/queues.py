"""Queue operations."""

from functools import partial

from tracker_bridge.cache.domain.keys import EntityType, entity_cache_key
from tracker_bridge.operations.application.base import KeyedOperation
from tracker_bridge.operations.domain.models import JsonObject


class GetQueueOperation(KeyedOperation[str, JsonObject]):
    operation_name = "get_queue"

    async def execute(self, key: str) -> JsonObject:
        return await self._with_cache(
            entity_cache_key(EntityType.QUEUE, key),
            partial(self._http.get, f"/v3/queues/{key}"),
        )
