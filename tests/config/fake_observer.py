"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []
        self.warnings: list[dict[str, int]] = []

    def config_loaded(self, api_base_url: str) -> None:
        self.loaded.append({"api_base_url": api_base_url})

    def config_concurrency_warning(
        self, max_concurrent_requests: int, max_batch_size: int
    ) -> None:
        self.warnings.append(
            {
                "max_concurrent_requests": max_concurrent_requests,
                "max_batch_size": max_batch_size,
            }
        )
