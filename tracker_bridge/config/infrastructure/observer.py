"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, api_base_url: str) -> None:
        self._log.info("config.loaded", api_base_url=api_base_url)

    def config_concurrency_warning(
        self, max_concurrent_requests: int, max_batch_size: int
    ) -> None:
        self._log.warning(
            "config.concurrency_warning",
            max_concurrent_requests=max_concurrent_requests,
            max_batch_size=max_batch_size,
            message="max_concurrent_requests exceeds max_batch_size; "
            "a single chunk can never fill the concurrency limit",
        )
