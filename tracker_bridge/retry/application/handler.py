"""RetryHandler — runs one async call, retrying it as its RetryStrategy allows."""

import asyncio
from collections.abc import Awaitable, Callable

from tracker_bridge.retry.domain.observer import RetryObserver
from tracker_bridge.retry.domain.strategy import RetryStrategy


class RetryHandler:
    """Executes a zero-argument async callable with retry and backoff.

    All policy lives in the strategy: the handler asks it whether to retry and
    sleeps for exactly the delay it returns. Attempts for one call are strictly
    sequential.
    """

    def __init__(self, strategy: RetryStrategy, observer: RetryObserver) -> None:
        self._strategy = strategy
        self._observer = observer

    @property
    def strategy(self) -> RetryStrategy:
        return self._strategy

    async def execute_with_retry[T](
        self, fn: Callable[[], Awaitable[T]], start_attempt: int = 0
    ) -> T:
        """Return the first successful result of ``fn``.

        ``start_attempt`` lets a caller resume a partially spent retry budget.

        Raises:
            Exception: the last error raised by ``fn``, unchanged, once the
                strategy declines to retry.
        """
        attempt = start_attempt
        while True:
            try:
                return await fn()
            except Exception as exc:
                status_code = _status_code_of(exc)
                if not self._strategy.should_retry(exc, attempt):
                    # Only a retriable error can have run out of attempts.
                    retriable = getattr(exc, "retriable", False) is True
                    if retriable and attempt >= self._strategy.max_retries:
                        self._observer.retry_exhausted(
                            attempts=attempt + 1,
                            status_code=status_code,
                            reason=str(exc),
                        )
                    else:
                        self._observer.retry_not_retryable(
                            attempt=attempt + 1,
                            status_code=status_code,
                            reason=str(exc),
                        )
                    raise

                delay_ms = self._strategy.get_delay(attempt, exc)
                self._observer.retry_scheduled(
                    attempt=attempt + 1,
                    max_retries=self._strategy.max_retries,
                    status_code=status_code,
                    reason=str(exc),
                    delay_ms=delay_ms,
                )
            await asyncio.sleep(delay_ms / 1000)
            attempt += 1


def _status_code_of(error: BaseException) -> int | None:
    status_code = getattr(error, "status_code", None)
    return status_code if isinstance(status_code, int) else None
