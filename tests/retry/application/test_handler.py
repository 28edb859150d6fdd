"""Tests for RetryHandler."""

from unittest.mock import AsyncMock, call, patch

import pytest

from tests.retry.fake_observer import FakeRetryObserver
from tests.retry.fake_strategy import FakeRetryStrategy
from tracker_bridge.http.domain.api_error import ApiError
from tracker_bridge.retry.application.handler import RetryHandler
from tracker_bridge.retry.infrastructure.exponential_backoff import (
    ExponentialBackoffStrategy,
)

SLEEP = "tracker_bridge.retry.application.handler.asyncio.sleep"


class _ScriptedCall:
    """Zero-argument async callable raising each scripted error, then returning."""

    def __init__(self, errors: list[BaseException], result: object = "ok") -> None:
        self._errors = list(errors)
        self._result = result
        self.calls = 0

    async def __call__(self) -> object:
        self.calls += 1
        if self._errors:
            raise self._errors.pop(0)
        return self._result


def _make_handler(
    max_retries: int = 3,
) -> tuple[RetryHandler, FakeRetryObserver]:
    observer = FakeRetryObserver()
    strategy = ExponentialBackoffStrategy(
        max_retries=max_retries, base_delay_ms=1000, max_delay_ms=10000
    )
    return RetryHandler(strategy=strategy, observer=observer), observer


class TestSuccess:
    async def test_returns_first_result_without_retrying(self) -> None:
        handler, observer = _make_handler()
        fn = _ScriptedCall(errors=[], result={"key": "A"})

        assert await handler.execute_with_retry(fn) == {"key": "A"}
        assert fn.calls == 1
        assert observer.scheduled == []


class TestRetryableErrors:
    """Retryable errors are retried with backoff until success or exhaustion."""

    @patch(SLEEP, new_callable=AsyncMock)
    async def test_two_server_errors_then_success(self, mock_sleep: AsyncMock) -> None:
        handler, observer = _make_handler()
        fn = _ScriptedCall(
            errors=[ApiError(500, "boom"), ApiError(500, "boom")], result="done"
        )

        assert await handler.execute_with_retry(fn) == "done"

        assert fn.calls == 3
        assert [e.attempt for e in observer.scheduled] == [1, 2]
        assert all(e.status_code == 500 for e in observer.scheduled)
        assert observer.not_retryable == []
        assert mock_sleep.await_args_list == [call(1.0), call(2.0)]

    @patch(SLEEP, new_callable=AsyncMock)
    async def test_k_failures_then_success_calls_fn_k_plus_one_times(
        self, mock_sleep: AsyncMock
    ) -> None:
        handler, observer = _make_handler(max_retries=5)
        fn = _ScriptedCall(errors=[ApiError(0, "connection reset")] * 4)

        await handler.execute_with_retry(fn)

        assert fn.calls == 5
        assert [e.attempt for e in observer.scheduled] == [1, 2, 3, 4]

    @patch(SLEEP, new_callable=AsyncMock)
    async def test_persistent_error_raises_last_error_after_max_retries(
        self, mock_sleep: AsyncMock
    ) -> None:
        handler, observer = _make_handler(max_retries=2)
        errors = [ApiError(503, "down #1"), ApiError(503, "down #2"), ApiError(503, "down #3")]
        fn = _ScriptedCall(errors=list(errors))

        with pytest.raises(ApiError) as exc_info:
            await handler.execute_with_retry(fn)

        assert fn.calls == 3
        assert exc_info.value is errors[2]
        assert len(observer.scheduled) == 2
        assert len(observer.exhausted) == 1
        assert observer.exhausted[0].attempts == 3

    @patch(SLEEP, new_callable=AsyncMock)
    async def test_zero_max_retries_makes_a_single_attempt(
        self, mock_sleep: AsyncMock
    ) -> None:
        handler, observer = _make_handler(max_retries=0)
        fn = _ScriptedCall(errors=[ApiError(500, "boom")])

        with pytest.raises(ApiError):
            await handler.execute_with_retry(fn)

        assert fn.calls == 1
        assert len(observer.exhausted) == 1
        mock_sleep.assert_not_called()

    async def test_zero_max_retries_client_error_is_not_retryable(self) -> None:
        """With no retries configured a 400 is still reported as non-retryable."""
        handler, observer = _make_handler(max_retries=0)
        fn = _ScriptedCall(errors=[ApiError(400, "bad request")])

        with pytest.raises(ApiError):
            await handler.execute_with_retry(fn)

        assert len(observer.not_retryable) == 1
        assert observer.not_retryable[0].status_code == 400
        assert observer.exhausted == []


class TestNonRetryableErrors:
    """Client errors fail on the first attempt."""

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 422])
    @patch(SLEEP, new_callable=AsyncMock)
    async def test_client_error_is_not_retried(
        self, mock_sleep: AsyncMock, status_code: int
    ) -> None:
        handler, observer = _make_handler()
        error = ApiError(status_code, "client error")
        fn = _ScriptedCall(errors=[error])

        with pytest.raises(ApiError) as exc_info:
            await handler.execute_with_retry(fn)

        assert exc_info.value is error
        assert fn.calls == 1
        assert len(observer.not_retryable) == 1
        assert observer.not_retryable[0].status_code == status_code
        assert observer.scheduled == []
        assert observer.exhausted == []
        mock_sleep.assert_not_called()

    async def test_unexpected_exception_propagates_unchanged(self) -> None:
        handler, observer = _make_handler()
        error = KeyError("missing")
        fn = _ScriptedCall(errors=[error])

        with pytest.raises(KeyError) as exc_info:
            await handler.execute_with_retry(fn)

        assert exc_info.value is error
        assert observer.not_retryable[0].status_code is None


class TestStrategyDelegation:
    """The handler asks the strategy for every decision and delay."""

    @patch(SLEEP, new_callable=AsyncMock)
    async def test_uses_strategy_delay_verbatim(self, mock_sleep: AsyncMock) -> None:
        strategy = FakeRetryStrategy(max_retries=2, delay_ms=250)
        observer = FakeRetryObserver()
        handler = RetryHandler(strategy=strategy, observer=observer)
        fn = _ScriptedCall(errors=[ValueError("a"), ValueError("b")])

        await handler.execute_with_retry(fn)

        assert strategy.delay_queries == [0, 1]
        assert [e.delay_ms for e in observer.scheduled] == [250, 250]
        assert mock_sleep.await_args_list == [call(0.25), call(0.25)]

    @patch(SLEEP, new_callable=AsyncMock)
    async def test_start_attempt_resumes_the_budget(self, mock_sleep: AsyncMock) -> None:
        strategy = FakeRetryStrategy(max_retries=3)
        handler = RetryHandler(strategy=strategy, observer=FakeRetryObserver())
        fn = _ScriptedCall(errors=[ValueError("x")] * 5)

        with pytest.raises(ValueError):
            await handler.execute_with_retry(fn, start_attempt=2)

        assert fn.calls == 2
        assert [q.attempt for q in strategy.should_retry_queries] == [2, 3]

    @patch(SLEEP, new_callable=AsyncMock)
    async def test_retry_after_hint_is_honoured(self, mock_sleep: AsyncMock) -> None:
        handler, observer = _make_handler()
        fn = _ScriptedCall(errors=[ApiError(429, "slow down", retry_after=5)])

        await handler.execute_with_retry(fn)

        assert observer.scheduled[0].delay_ms == 5000
        mock_sleep.assert_awaited_once_with(5.0)
