"""CacheManager port — the shared cache consulted by cache-aside operations."""

from typing import Any, Protocol


class CacheManager(Protocol):
    """Async key/value cache.

    Implementations own their concurrency safety; concurrent writers to one
    key resolve as last-write-wins. ``get`` returns ``None`` on a miss.
    """

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None: ...

    async def delete(self, key: str) -> None: ...
