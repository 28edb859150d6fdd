"""Base exception class for all tracker-bridge-specific errors."""


class TrackerBridgeError(Exception):
    """Base class for all tracker-bridge errors.

    ``retriable`` tells callers whether repeating the failed step may succeed.
    """

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
