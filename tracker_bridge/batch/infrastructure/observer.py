"""Structlog implementation of the BatchObserver port."""

import structlog


class StructlogBatchObserver:
    """Delegates batch events to structlog.

    Satisfies the BatchObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_empty(self, operation_name: str) -> None:
        self._log.warning(
            "batch.empty",
            operation_name=operation_name,
            message="No operations to execute",
        )

    def batch_started(
        self,
        operation_name: str,
        total: int,
        chunk_count: int,
        max_concurrent: int,
    ) -> None:
        self._log.info(
            "batch.started",
            operation_name=operation_name,
            total=total,
            chunk_count=chunk_count,
            max_concurrent=max_concurrent,
        )

    def batch_chunk_completed(
        self, operation_name: str, chunk_index: int, chunk_count: int
    ) -> None:
        self._log.debug(
            "batch.chunk_completed",
            operation_name=operation_name,
            chunk_index=chunk_index,
            chunk_count=chunk_count,
        )

    def batch_item_failed(
        self, operation_name: str, key: str, index: int, reason: str
    ) -> None:
        self._log.warning(
            "batch.item_failed",
            operation_name=operation_name,
            key=key,
            index=index,
            reason=reason,
        )

    def batch_completed(
        self,
        operation_name: str,
        total: int,
        successful: int,
        failed: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "batch.completed",
            operation_name=operation_name,
            total=total,
            successful=successful,
            failed=failed,
            elapsed_seconds=round(elapsed_seconds, 3),
        )
