"""Root configuration model for tracker-bridge."""

from typing import Literal

from pydantic import BaseModel, Field

from tracker_bridge.config.domain.cache import CacheConfig
from tracker_bridge.config.domain.execution import ExecutorConfig, RetryConfig

type LogLevel = Literal["debug", "info", "warn", "warning", "error"]
type LogFormat = Literal["console", "json"]

DEFAULT_API_BASE_URL = "https://api.tracker.yandex.net"


class TrackerConfig(BaseModel, frozen=True):
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_ms: int = Field(default=30_000, ge=5_000, le=120_000)
    headers: dict[str, str] = Field(default_factory=dict)
    batch: ExecutorConfig = Field(default_factory=ExecutorConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    log_level: LogLevel = "info"
    log_format: LogFormat = "console"
