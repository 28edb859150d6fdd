"""Observer port for the retry domain — defines events in domain language."""

from typing import Protocol


class RetryObserver(Protocol):
    def retry_scheduled(
        self,
        attempt: int,
        max_retries: int,
        status_code: int | None,
        reason: str,
        delay_ms: int,
    ) -> None: ...

    def retry_not_retryable(
        self, attempt: int, status_code: int | None, reason: str
    ) -> None: ...

    def retry_exhausted(
        self, attempts: int, status_code: int | None, reason: str
    ) -> None: ...
