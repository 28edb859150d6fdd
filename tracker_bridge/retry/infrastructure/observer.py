"""Structlog implementation of the RetryObserver port."""

import structlog


class StructlogRetryObserver:
    """Delegates retry events to structlog.

    Satisfies the RetryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def retry_scheduled(
        self,
        attempt: int,
        max_retries: int,
        status_code: int | None,
        reason: str,
        delay_ms: int,
    ) -> None:
        self._log.warning(
            "retry.scheduled",
            attempt=attempt,
            max_retries=max_retries,
            status_code=status_code,
            reason=reason,
            delay_ms=delay_ms,
        )

    def retry_not_retryable(
        self, attempt: int, status_code: int | None, reason: str
    ) -> None:
        self._log.debug(
            "retry.not_retryable",
            attempt=attempt,
            status_code=status_code,
            reason=reason,
        )

    def retry_exhausted(
        self, attempts: int, status_code: int | None, reason: str
    ) -> None:
        self._log.warning(
            "retry.exhausted",
            attempts=attempts,
            status_code=status_code,
            reason=reason,
        )
