"""Structlog implementation of the OperationObserver port."""

import structlog


class StructlogOperationObserver:
    """Delegates operation events to structlog.

    Satisfies the OperationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def cache_hit(self, operation_name: str, cache_key: str) -> None:
        self._log.debug(
            "operation.cache_hit", operation_name=operation_name, cache_key=cache_key
        )

    def cache_miss(self, operation_name: str, cache_key: str) -> None:
        self._log.debug(
            "operation.cache_miss", operation_name=operation_name, cache_key=cache_key
        )

    def cache_write_failed(
        self, operation_name: str, cache_key: str, reason: str
    ) -> None:
        self._log.warning(
            "operation.cache_write_failed",
            operation_name=operation_name,
            cache_key=cache_key,
            reason=reason,
        )

    def cache_invalidated(self, operation_name: str, cache_keys: list[str]) -> None:
        self._log.debug(
            "operation.cache_invalidated",
            operation_name=operation_name,
            cache_keys=cache_keys,
        )

    def cache_invalidation_failed(
        self, operation_name: str, cache_key: str, reason: str
    ) -> None:
        self._log.warning(
            "operation.cache_invalidation_failed",
            operation_name=operation_name,
            cache_key=cache_key,
            reason=reason,
        )

    def operation_batch_empty(self, operation_name: str) -> None:
        self._log.warning(
            "operation.batch_empty",
            operation_name=operation_name,
            message="Empty batch, nothing to execute",
        )

    def operation_batch_started(self, operation_name: str, total: int) -> None:
        self._log.info(
            "operation.batch_started", operation_name=operation_name, total=total
        )
