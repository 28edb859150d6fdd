"""HttpxTrackerClient — HttpClient implementation backed by httpx.AsyncClient."""

import time
from typing import Any

import httpx

from tracker_bridge.http.domain.api_error import ApiError
from tracker_bridge.http.domain.observer import HttpObserver
from tracker_bridge.http.infrastructure.error_mapper import (
    api_error_from_response,
    api_error_from_transport,
)


class HttpxTrackerClient:
    """JSON client for the tracker REST API.

    Uses one long-lived AsyncClient so connections are pooled across a batch.
    The request timeout is the only deadline in the call chain; expiring it
    surfaces as a status-0 ApiError. Satisfies the HttpClient protocol.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int,
        observer: HttpObserver,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._observer = observer
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"Accept": "application/json", **(headers or {})},
            timeout=httpx.Timeout(timeout_ms / 1000.0),
            transport=transport,
        )

    async def __aenter__(self) -> "HttpxTrackerClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client and release pooled connections."""
        await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self._request("POST", path, json=body)

    async def patch(self, path: str, body: Any = None) -> Any:
        return await self._request("PATCH", path, json=body)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        started_at = time.monotonic()
        try:
            response = await self._client.request(
                method, path, params=params, json=json
            )
        except httpx.HTTPError as exc:
            error = api_error_from_transport(exc)
            self._report_failure(method=method, path=path, error=error)
            raise error from exc

        if response.is_error:
            error = api_error_from_response(response)
            self._report_failure(method=method, path=path, error=error)
            raise error

        self._observer.http_request_completed(
            method=method,
            path=path,
            status_code=response.status_code,
            elapsed_seconds=time.monotonic() - started_at,
        )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                status_code=response.status_code,
                message=f"Failed to decode response body: {exc}",
            ) from exc

    def _report_failure(self, method: str, path: str, error: ApiError) -> None:
        self._observer.http_request_failed(
            method=method,
            path=path,
            status_code=error.status_code,
            reason=error.message,
        )
