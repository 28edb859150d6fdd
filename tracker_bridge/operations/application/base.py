"""Shared composition for tracker operations: cache-aside, retry and batching."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any, ClassVar

from tracker_bridge.batch.application.executor import ParallelExecutor
from tracker_bridge.batch.domain.result import BatchResult, OperationDescriptor
from tracker_bridge.cache.domain.manager import CacheManager
from tracker_bridge.http.domain.client import HttpClient
from tracker_bridge.operations.domain.observer import OperationObserver
from tracker_bridge.retry.application.handler import RetryHandler


@dataclass(frozen=True)
class PayloadItem[K, I]:
    """One entry of a batch whose items carry input besides their key."""

    key: K
    payload: I


class BaseOperation:
    """Dependencies and helpers every tracker operation shares.

    Subclasses only describe the single network call for one item; retry,
    caching and parallelism all come from here.
    """

    operation_name: ClassVar[str] = "operation"

    def __init__(
        self,
        http_client: HttpClient,
        cache: CacheManager,
        retry_handler: RetryHandler,
        executor: ParallelExecutor,
        observer: OperationObserver,
        cache_ttl_ms: int | None = None,
    ) -> None:
        self._http = http_client
        self._cache = cache
        self._retry_handler = retry_handler
        self._executor = executor
        self._observer = observer
        self._cache_ttl_ms = cache_ttl_ms

    async def _with_cache[V](
        self, cache_key: str, fetch: Callable[[], Awaitable[V]]
    ) -> V:
        """Return the cached value for ``cache_key`` or fetch, retrying, and cache it.

        A hit makes no network call and never touches the retry handler.
        Failures propagate and are never cached.
        """
        cached = await self._cache.get(cache_key)
        if cached is not None:
            self._observer.cache_hit(
                operation_name=self.operation_name, cache_key=cache_key
            )
            return cached

        self._observer.cache_miss(operation_name=self.operation_name, cache_key=cache_key)
        value = await self._retry_handler.execute_with_retry(fetch)
        await self._store(cache_key, value)
        return value

    async def _with_retry[V](self, call: Callable[[], Awaitable[V]]) -> V:
        return await self._retry_handler.execute_with_retry(call)

    async def _store(self, cache_key: str, value: Any) -> None:
        # The operation already succeeded; a failed write is only reported.
        if value is None:
            return
        try:
            await self._cache.set(cache_key, value, self._cache_ttl_ms)
        except Exception as exc:
            self._observer.cache_write_failed(
                operation_name=self.operation_name,
                cache_key=cache_key,
                reason=str(exc),
            )

    async def _invalidate(self, *cache_keys: str) -> None:
        # Runs after a successful mutation; a failed delete is only reported.
        invalidated: list[str] = []
        for cache_key in cache_keys:
            try:
                await self._cache.delete(cache_key)
            except Exception as exc:
                self._observer.cache_invalidation_failed(
                    operation_name=self.operation_name,
                    cache_key=cache_key,
                    reason=str(exc),
                )
            else:
                invalidated.append(cache_key)
        if invalidated:
            self._observer.cache_invalidated(
                operation_name=self.operation_name, cache_keys=invalidated
            )

    async def _run_batch[K, V](
        self, descriptors: Sequence[OperationDescriptor[K, V]]
    ) -> list[BatchResult[K, V]]:
        if not descriptors:
            self._observer.operation_batch_empty(operation_name=self.operation_name)
            return []
        self._observer.operation_batch_started(
            operation_name=self.operation_name, total=len(descriptors)
        )
        return await self._executor.execute_parallel(
            descriptors, operation_name=self.operation_name
        )


class KeyedOperation[K, V](BaseOperation):
    """An operation fully identified by its key (fetch by id, and so on)."""

    async def execute(self, key: K) -> V:
        raise NotImplementedError

    async def execute_many(self, keys: Sequence[K]) -> list[BatchResult[K, V]]:
        """Execute for every key in parallel; one result per key, in order."""
        return await self._run_batch(
            [OperationDescriptor(key=key, fn=partial(self.execute, key)) for key in keys]
        )


class PayloadOperation[K, I, V](BaseOperation):
    """An operation that needs input besides the key (create, add, update)."""

    async def execute(self, key: K, payload: I) -> V:
        raise NotImplementedError

    async def execute_many(
        self, items: Sequence[PayloadItem[K, I]]
    ) -> list[BatchResult[K, V]]:
        """Execute for every item in parallel; one result per item, in order."""
        return await self._run_batch(
            [
                OperationDescriptor(
                    key=item.key, fn=partial(self.execute, item.key, item.payload)
                )
                for item in items
            ]
        )
