"""Observer port for tracker operations — defines events in domain language."""

from typing import Protocol


class OperationObserver(Protocol):
    def cache_hit(self, operation_name: str, cache_key: str) -> None: ...

    def cache_miss(self, operation_name: str, cache_key: str) -> None: ...

    def cache_write_failed(
        self, operation_name: str, cache_key: str, reason: str
    ) -> None: ...

    def cache_invalidated(self, operation_name: str, cache_keys: list[str]) -> None: ...

    def cache_invalidation_failed(
        self, operation_name: str, cache_key: str, reason: str
    ) -> None: ...

    def operation_batch_empty(self, operation_name: str) -> None: ...

    def operation_batch_started(self, operation_name: str, total: int) -> None: ...
