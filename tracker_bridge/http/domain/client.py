"""HttpClient port — the narrow interface operations use to reach the tracker API."""

from typing import Any, Protocol


class HttpClient(Protocol):
    """Async JSON-over-HTTP client.

    Every method returns the decoded JSON body (``None`` for an empty body) and
    raises ApiError on a non-2xx response or a transport failure.
    """

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any: ...

    async def post(self, path: str, body: Any = None) -> Any: ...

    async def patch(self, path: str, body: Any = None) -> Any: ...

    async def delete(self, path: str) -> Any: ...
