"""Structlog implementation of the HttpObserver port."""

import structlog


class StructlogHttpObserver:
    """Delegates http events to structlog.

    Satisfies the HttpObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def http_request_completed(
        self, method: str, path: str, status_code: int, elapsed_seconds: float
    ) -> None:
        self._log.debug(
            "http.request_completed",
            method=method,
            path=path,
            status_code=status_code,
            elapsed_seconds=round(elapsed_seconds, 3),
        )

    def http_request_failed(
        self, method: str, path: str, status_code: int, reason: str
    ) -> None:
        self._log.warning(
            "http.request_failed",
            method=method,
            path=path,
            status_code=status_code,
            reason=reason,
        )
