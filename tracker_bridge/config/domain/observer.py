"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, api_base_url: str) -> None: ...

    def config_concurrency_warning(
        self, max_concurrent_requests: int, max_batch_size: int
    ) -> None: ...
