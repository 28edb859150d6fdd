"""Exponential backoff RetryStrategy for tracker API errors."""

import random

from tracker_bridge.config.domain.execution import RetryConfig
from tracker_bridge.http.domain.api_error import RETRYABLE_STATUS_CODES, ApiError


class ExponentialBackoffStrategy:
    """Retries transport, timeout, rate-limit and 5xx errors with doubling delays.

    The delay for attempt ``n`` (0-based) is ``base_delay_ms * 2**n`` capped at
    ``max_delay_ms``, optionally spread by ``jitter_ratio``.

    A 429 that carries ``retry_after`` waits exactly that many seconds instead.
    The server's hint takes precedence over the exponential delay and is not
    capped by ``max_delay_ms``.

    Only ApiError is retried; any other exception is treated as a bug in the
    calling code and surfaces immediately. Satisfies the RetryStrategy protocol.
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay_ms: int = 1000,
        max_delay_ms: int = 10000,
        jitter_ratio: float = 0.0,
    ) -> None:
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        if not 0.0 <= jitter_ratio <= 1.0:
            raise ValueError(f"jitter_ratio must be within [0, 1], got {jitter_ratio}")
        self._max_retries = max_retries
        self._base_delay_ms = base_delay_ms
        self._max_delay_ms = max_delay_ms
        self._jitter_ratio = jitter_ratio

    @classmethod
    def from_config(cls, config: RetryConfig) -> "ExponentialBackoffStrategy":
        return cls(
            max_retries=config.attempts,
            base_delay_ms=config.min_delay_ms,
            max_delay_ms=config.max_delay_ms,
            jitter_ratio=config.jitter_ratio,
        )

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def should_retry(self, error: BaseException, attempt: int) -> bool:
        if attempt >= self._max_retries:
            return False
        return (
            isinstance(error, ApiError)
            and error.status_code in RETRYABLE_STATUS_CODES
        )

    def get_delay(self, attempt: int, error: BaseException | None = None) -> int:
        if (
            isinstance(error, ApiError)
            and error.status_code == 429
            and error.retry_after is not None
        ):
            return error.retry_after * 1000

        delay = self._base_delay_ms * 2 ** max(attempt, 0)
        if self._jitter_ratio > 0:
            spread = random.uniform(1 - self._jitter_ratio, 1 + self._jitter_ratio)
            delay = int(delay * spread)
        return min(delay, self._max_delay_ms)
