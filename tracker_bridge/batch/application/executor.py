"""ParallelExecutor — runs labelled async operations with bounded concurrency."""

import asyncio
import math
import time
from collections.abc import Sequence

from tracker_bridge.batch.domain.observer import BatchObserver
from tracker_bridge.batch.domain.result import (
    BatchResult,
    Fulfilled,
    OperationDescriptor,
    Rejected,
)
from tracker_bridge.config.domain.execution import ExecutorConfig


class ParallelExecutor:
    """Executes a batch of operations and reports one outcome per operation.

    At most ``max_concurrent_requests`` operations are in flight at once across
    the whole batch. ``max_batch_size`` splits the batch into chunks that are
    only used for progress reporting. A failing operation becomes a Rejected
    result carrying the original exception; it never cancels or delays its
    siblings, and the batch as a whole never raises because of it.
    """

    def __init__(self, config: ExecutorConfig, observer: BatchObserver) -> None:
        self._config = config
        self._observer = observer

    async def execute_parallel[K, V](
        self,
        operations: Sequence[OperationDescriptor[K, V]],
        operation_name: str = "operation",
    ) -> list[BatchResult[K, V]]:
        """Run every operation and return results in input order.

        ``results[i]`` always belongs to ``operations[i]``, whatever order the
        operations finish in.
        """
        if not operations:
            self._observer.batch_empty(operation_name=operation_name)
            return []

        total = len(operations)
        chunk_size = self._config.max_batch_size
        chunk_count = math.ceil(total / chunk_size)
        self._observer.batch_started(
            operation_name=operation_name,
            total=total,
            chunk_count=chunk_count,
            max_concurrent=self._config.max_concurrent_requests,
        )
        started_at = time.monotonic()

        results: list[BatchResult[K, V] | None] = [None] * total
        sem = asyncio.Semaphore(self._config.max_concurrent_requests)
        # Outstanding operations per chunk; guarded by progress_lock.
        chunk_remaining = [
            min(chunk_size, total - chunk_index * chunk_size)
            for chunk_index in range(chunk_count)
        ]
        progress_lock = asyncio.Lock()

        async with asyncio.TaskGroup() as tg:
            for index, operation in enumerate(operations):
                tg.create_task(
                    self._run_one(
                        sem=sem,
                        operation=operation,
                        index=index,
                        operation_name=operation_name,
                        results=results,
                        chunk_remaining=chunk_remaining,
                        chunk_count=chunk_count,
                        progress_lock=progress_lock,
                    )
                )

        settled = [result for result in results if result is not None]
        failed = sum(1 for result in settled if isinstance(result, Rejected))
        self._observer.batch_completed(
            operation_name=operation_name,
            total=total,
            successful=total - failed,
            failed=failed,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return settled

    async def _run_one[K, V](
        self,
        sem: asyncio.Semaphore,
        operation: OperationDescriptor[K, V],
        index: int,
        operation_name: str,
        results: list[BatchResult[K, V] | None],
        chunk_remaining: list[int],
        chunk_count: int,
        progress_lock: asyncio.Lock,
    ) -> None:
        """Run one operation and store its outcome at ``index``.

        Exceptions are captured, never raised, so the TaskGroup never cancels
        sibling tasks.
        """
        async with sem:
            try:
                value = await operation.fn()
            except Exception as exc:
                results[index] = Rejected(key=operation.key, index=index, reason=exc)
                self._observer.batch_item_failed(
                    operation_name=operation_name,
                    key=str(operation.key),
                    index=index,
                    reason=str(exc),
                )
            else:
                results[index] = Fulfilled(key=operation.key, index=index, value=value)

        chunk_index = index // self._config.max_batch_size
        async with progress_lock:
            chunk_remaining[chunk_index] -= 1
            if chunk_remaining[chunk_index] == 0:
                self._observer.batch_chunk_completed(
                    operation_name=operation_name,
                    chunk_index=chunk_index,
                    chunk_count=chunk_count,
                )
