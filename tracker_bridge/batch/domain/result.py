"""Per-item batch outcomes and the descriptors that produce them."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class OperationDescriptor[K, V]:
    """One labelled unit of work.

    ``fn`` may be called again by retry logic, so it must be safe to repeat.
    """

    key: K
    fn: Callable[[], Awaitable[V]]


@dataclass(frozen=True)
class Fulfilled[K, V]:
    key: K
    index: int
    value: V
    status: Literal["fulfilled"] = field(default="fulfilled", init=False)


@dataclass(frozen=True)
class Rejected[K]:
    key: K
    index: int
    reason: BaseException
    status: Literal["rejected"] = field(default="rejected", init=False)


type BatchResult[K, V] = Fulfilled[K, V] | Rejected[K]
