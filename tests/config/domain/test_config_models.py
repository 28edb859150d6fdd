"""Tests for validation constraints and defaults on config domain models."""

import pytest
from pydantic import ValidationError

from tracker_bridge.config.domain.cache import CacheConfig
from tracker_bridge.config.domain.config import DEFAULT_API_BASE_URL, TrackerConfig
from tracker_bridge.config.domain.execution import ExecutorConfig, RetryConfig


class TestDefaults:
    def test_tracker_config_defaults(self) -> None:
        cfg = TrackerConfig()

        assert cfg.api_base_url == DEFAULT_API_BASE_URL
        assert cfg.request_timeout_ms == 30_000
        assert cfg.batch == ExecutorConfig(max_batch_size=200, max_concurrent_requests=5)
        assert cfg.retry.attempts == 3
        assert cfg.retry.min_delay_ms == 1000
        assert cfg.retry.max_delay_ms == 10000
        assert cfg.cache.enabled is True
        assert cfg.log_level == "info"
        assert cfg.log_format == "console"


class TestExecutorConfigConstraints:
    """ExecutorConfig rejects non-positive and oversized bounds."""

    @pytest.mark.parametrize("value", [0, -1, 1001])
    def test_max_batch_size_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError):
            ExecutorConfig(max_batch_size=value)

    @pytest.mark.parametrize("value", [0, 21])
    def test_max_concurrent_requests_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError):
            ExecutorConfig(max_concurrent_requests=value)

    def test_bounds_are_inclusive(self) -> None:
        ExecutorConfig(max_batch_size=1, max_concurrent_requests=1)
        ExecutorConfig(max_batch_size=1000, max_concurrent_requests=20)

    def test_is_frozen(self) -> None:
        cfg = ExecutorConfig()
        with pytest.raises(ValidationError):
            cfg.max_batch_size = 10  # type: ignore[misc]


class TestRetryConfigConstraints:
    def test_zero_attempts_allowed(self) -> None:
        assert RetryConfig(attempts=0).attempts == 0

    @pytest.mark.parametrize("value", [-1, 11])
    def test_attempts_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError):
            RetryConfig(attempts=value)

    def test_min_delay_below_minimum(self) -> None:
        with pytest.raises(ValidationError):
            RetryConfig(min_delay_ms=50)

    def test_max_delay_above_maximum(self) -> None:
        with pytest.raises(ValidationError):
            RetryConfig(max_delay_ms=60_001)

    def test_max_delay_must_not_be_below_min_delay(self) -> None:
        with pytest.raises(ValidationError, match="max_delay_ms"):
            RetryConfig(min_delay_ms=5000, max_delay_ms=2000)

    def test_jitter_ratio_range(self) -> None:
        with pytest.raises(ValidationError):
            RetryConfig(jitter_ratio=1.5)


class TestTrackerConfigConstraints:
    @pytest.mark.parametrize("value", [4_999, 120_001])
    def test_request_timeout_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationError):
            TrackerConfig(request_timeout_ms=value)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            TrackerConfig(log_level="trace")  # type: ignore[arg-type]

    def test_negative_cache_ttl(self) -> None:
        with pytest.raises(ValidationError):
            CacheConfig(ttl_ms=-1)

    def test_cache_max_entries_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CacheConfig(max_entries=0)
