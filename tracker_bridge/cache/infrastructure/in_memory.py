"""In-process CacheManager implementations."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    # None means the entry never expires.
    expires_at: float | None


class InMemoryCacheManager:
    """Dictionary-backed cache with per-entry TTL.

    Expired entries are evicted when read, and swept whenever a write takes the
    cache past ``max_entries``; if that is not enough the oldest writes go.
    All methods run to completion without awaiting, so they are atomic with
    respect to other tasks on the same event loop. Satisfies the CacheManager
    protocol.
    """

    def __init__(
        self,
        default_ttl_ms: int = 300_000,
        max_entries: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._default_ttl_ms = default_ttl_ms
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            del self._entries[key]
            return None
        return entry.value

    async def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None:
        ttl = self._default_ttl_ms if ttl_ms is None else ttl_ms
        expires_at = self._clock() + ttl / 1000 if ttl > 0 else None
        # Re-inserting moves the key to the newest position.
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at)
        if len(self._entries) > self._max_entries:
            self._prune()

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def _prune(self) -> None:
        now = self._clock()
        expired = [
            key
            for key, entry in self._entries.items()
            if entry.expires_at is not None and now >= entry.expires_at
        ]
        for key in expired:
            del self._entries[key]
        while len(self._entries) > self._max_entries:
            del self._entries[next(iter(self._entries))]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class NoOpCacheManager:
    """Cache that stores nothing; every lookup misses."""

    async def get(self, key: str) -> Any | None:
        return None

    async def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None:
        return None

    async def delete(self, key: str) -> None:
        return None
