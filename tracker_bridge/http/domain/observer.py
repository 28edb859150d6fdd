"""Observer port for the http context."""

from typing import Protocol


class HttpObserver(Protocol):
    def http_request_completed(
        self, method: str, path: str, status_code: int, elapsed_seconds: float
    ) -> None: ...

    def http_request_failed(
        self, method: str, path: str, status_code: int, reason: str
    ) -> None: ...
