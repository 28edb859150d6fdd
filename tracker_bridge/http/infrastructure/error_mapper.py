"""Translate httpx responses and exceptions into ApiError."""

from typing import Any

import httpx

from tracker_bridge.http.domain.api_error import NETWORK_ERROR, ApiError

DEFAULT_RETRY_AFTER_SECONDS = 60


def api_error_from_response(response: httpx.Response) -> ApiError:
    """Build an ApiError from a non-2xx response.

    The message prefers the tracker's ``errorMessages[0]``, then ``message``,
    then a generic ``HTTP <status>``. A 429 always carries ``retry_after``.
    """
    body = _json_or_none(response)
    status = response.status_code

    if status == 429:
        retry_after = _parse_retry_after(response.headers.get("Retry-After"))
        return ApiError(
            status_code=status,
            message=f"Rate limit exceeded. Retry after {retry_after} seconds.",
            retry_after=retry_after,
        )

    return ApiError(
        status_code=status,
        message=_extract_message(body) or f"HTTP {status}",
        errors=_extract_field_errors(body),
    )


def api_error_from_transport(exc: httpx.HTTPError) -> ApiError:
    """Build a status-0 ApiError for failures where no response was received."""
    if isinstance(exc, httpx.TimeoutException):
        message = f"Request timed out: {exc}" if str(exc) else "Request timed out"
    else:
        message = str(exc) or type(exc).__name__
    return ApiError(status_code=NETWORK_ERROR, message=message)


def _json_or_none(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _extract_message(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    messages = body.get("errorMessages")
    if isinstance(messages, list) and messages:
        return str(messages[0])
    message = body.get("message")
    if message:
        return str(message)
    return None


def _extract_field_errors(body: Any) -> dict[str, list[str]] | None:
    if not isinstance(body, dict):
        return None
    raw = body.get("errors")
    if not isinstance(raw, dict) or not raw:
        return None
    errors: dict[str, list[str]] = {}
    for field, value in raw.items():
        if isinstance(value, list):
            errors[str(field)] = [str(item) for item in value]
        else:
            errors[str(field)] = [str(value)]
    return errors


def _parse_retry_after(header: str | None) -> int:
    # HTTP-date values are not supported; they fall back to the default.
    if header is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        seconds = int(header.strip())
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS
    return seconds if seconds > 0 else DEFAULT_RETRY_AFTER_SECONDS
