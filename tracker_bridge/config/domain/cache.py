"""Cache configuration model."""

from pydantic import BaseModel, Field


class CacheConfig(BaseModel, frozen=True):
    enabled: bool = True
    # 0 keeps entries until they are invalidated.
    ttl_ms: int = Field(default=300_000, ge=0)
    # Upper bound on live entries; the oldest writes are evicted beyond it.
    max_entries: int = Field(default=10_000, ge=1)
