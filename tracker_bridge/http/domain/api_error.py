"""ApiError — the normalised failure shape of every tracker API call."""

from typing import Any

from tracker_bridge.core.errors import TrackerBridgeError

# No HTTP response was received: DNS failure, connection reset, timeout.
NETWORK_ERROR = 0

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset(
    {NETWORK_ERROR, 408, 429, 500, 502, 503, 504}
)


class ApiError(TrackerBridgeError):
    """A failed tracker API call.

    Attributes:
        status_code: HTTP status, or 0 for transport-level failures.
        message: Human-readable reason reported by the API (or the transport).
        retry_after: Seconds to wait before retrying, when the API says so.
        errors: Field-level validation messages keyed by field name.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: dict[str, list[str]] | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(
            f"ApiError [{status_code}]: {message}",
            retriable=status_code in RETRYABLE_STATUS_CODES,
        )
        self.status_code = status_code
        self.message = message
        self.errors = errors
        self.retry_after = retry_after

    @property
    def is_network_error(self) -> bool:
        return self.status_code == NETWORK_ERROR

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status_code": self.status_code,
            "message": self.message,
        }
        if self.retry_after is not None:
            data["retry_after"] = self.retry_after
        if self.errors:
            data["errors"] = {field: list(msgs) for field, msgs in self.errors.items()}
        return data
