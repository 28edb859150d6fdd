"""Observer port for the batch domain — defines events in domain language."""

from typing import Protocol


class BatchObserver(Protocol):
    """Observer port emitting structured events while a batch executes."""

    def batch_empty(self, operation_name: str) -> None: ...

    def batch_started(
        self,
        operation_name: str,
        total: int,
        chunk_count: int,
        max_concurrent: int,
    ) -> None: ...

    def batch_chunk_completed(
        self, operation_name: str, chunk_index: int, chunk_count: int
    ) -> None: ...

    def batch_item_failed(
        self, operation_name: str, key: str, index: int, reason: str
    ) -> None: ...

    def batch_completed(
        self,
        operation_name: str,
        total: int,
        successful: int,
        failed: int,
        elapsed_seconds: float,
    ) -> None: ...
