"""Batch execution and retry configuration models."""

from typing import Self

from pydantic import BaseModel, Field, model_validator


class ExecutorConfig(BaseModel, frozen=True):
    """Bounds for ParallelExecutor.

    ``max_concurrent_requests`` caps in-flight calls across the whole batch;
    ``max_batch_size`` only groups work into chunks for progress reporting.
    """

    max_batch_size: int = Field(default=200, ge=1, le=1000)
    max_concurrent_requests: int = Field(default=5, ge=1, le=20)


class RetryConfig(BaseModel, frozen=True):
    attempts: int = Field(default=3, ge=0, le=10)
    min_delay_ms: int = Field(default=1000, ge=100, le=10000)
    max_delay_ms: int = Field(default=10000, ge=1000, le=60000)
    jitter_ratio: float = Field(default=0.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_delay_bounds(self) -> Self:
        if self.max_delay_ms < self.min_delay_ms:
            raise ValueError(
                f"max_delay_ms ({self.max_delay_ms}) must be >= "
                f"min_delay_ms ({self.min_delay_ms})"
            )
        return self
