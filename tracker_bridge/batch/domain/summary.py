"""Reductions of BatchResult lists into caller-facing summaries."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from tracker_bridge.batch.domain.result import BatchResult, Fulfilled, Rejected
from tracker_bridge.http.domain.api_error import ApiError

EMPTY_RESULT_MESSAGE = "entity not found (empty result)"


class BatchError(BaseModel, frozen=True):
    key: str
    error: dict[str, Any]


class BatchItem(BaseModel, frozen=True):
    key: str
    data: Any


class BatchSummary(BaseModel, frozen=True):
    total: int = Field(ge=0)
    successful: int = Field(ge=0)
    failed: int = Field(ge=0)
    errors: list[BatchError]


class BatchOutcome(BaseModel, frozen=True):
    successful: list[BatchItem]
    failed: list[BatchError]


def describe_error(error: BaseException) -> dict[str, Any]:
    """JSON-friendly description of a rejection reason."""
    if isinstance(error, ApiError):
        return error.to_dict()
    return {"message": str(error) or type(error).__name__}


def successful_values[K, V](results: Sequence[BatchResult[K, V]]) -> list[V]:
    return [r.value for r in results if isinstance(r, Fulfilled)]


def errors_of[K, V](results: Sequence[BatchResult[K, V]]) -> list[Rejected[K]]:
    return [r for r in results if isinstance(r, Rejected)]


def all_succeeded[K, V](results: Sequence[BatchResult[K, V]]) -> bool:
    return all(isinstance(r, Fulfilled) for r in results)


def has_errors[K, V](results: Sequence[BatchResult[K, V]]) -> bool:
    return any(isinstance(r, Rejected) for r in results)


def summarize[K, V](results: Sequence[BatchResult[K, V]]) -> BatchSummary:
    """Count outcomes and describe every failure, keyed by the item's key."""
    rejected = errors_of(results)
    return BatchSummary(
        total=len(results),
        successful=len(results) - len(rejected),
        failed=len(rejected),
        errors=[
            BatchError(key=str(r.key), error=describe_error(r.reason))
            for r in rejected
        ],
    )


def split_results[K, V](results: Sequence[BatchResult[K, V]]) -> BatchOutcome:
    """Partition results into successes and failures, in input order.

    A fulfilled ``None`` means the tracker returned nothing for the key and is
    reported as a failure.
    """
    successful: list[BatchItem] = []
    failed: list[BatchError] = []
    for result in results:
        key = str(result.key)
        if isinstance(result, Rejected):
            failed.append(BatchError(key=key, error=describe_error(result.reason)))
        elif result.value is None:
            failed.append(BatchError(key=key, error={"message": EMPTY_RESULT_MESSAGE}))
        else:
            successful.append(BatchItem(key=key, data=result.value))
    return BatchOutcome(successful=successful, failed=failed)
