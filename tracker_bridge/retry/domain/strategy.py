"""RetryStrategy port — the policy half of retrying."""

from typing import Protocol


class RetryStrategy(Protocol):
    """Decides whether a failed call is retried and how long to wait first.

    Implementations hold no mutable state, so one instance is shared by every
    concurrent call.
    """

    @property
    def max_retries(self) -> int: ...

    def should_retry(self, error: BaseException, attempt: int) -> bool: ...

    def get_delay(self, attempt: int, error: BaseException | None = None) -> int:
        """Milliseconds to wait before the next attempt."""
        ...
