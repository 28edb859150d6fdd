"""Task-list operations, for trackers that address tasks by project and task id."""

from functools import partial

from tracker_bridge.cache.domain.keys import task_cache_key
from tracker_bridge.operations.application.base import KeyedOperation
from tracker_bridge.operations.domain.models import JsonObject, TaskRef


class GetTasksOperation(KeyedOperation[TaskRef, JsonObject]):
    operation_name = "get_tasks"

    async def execute(self, key: TaskRef) -> JsonObject:
        return await self._with_cache(
            task_cache_key(key.project_id, key.task_id),
            partial(self._http.get, f"/project/{key.project_id}/task/{key.task_id}"),
        )
