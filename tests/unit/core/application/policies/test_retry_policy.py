from unittest.mock import AsyncMock

import pytest

from tasktrack.core.application.exceptions import StoreError
from tasktrack.core.application.policies import RetryPolicy


class TestRetryPolicy:
    async def test_retries_retryable_store_errors(self) -> None:
        fn = AsyncMock(side_effect=[StoreError("busy", status_code=503, retryable=True), ["ok"]])

        result = await RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0).run(fn)

        assert result == ["ok"]
        assert fn.await_count == 2

    async def test_does_not_retry_permanent_errors(self) -> None:
        fn = AsyncMock(side_effect=StoreError("unauthorized", status_code=401))

        with pytest.raises(StoreError):
            await RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0).run(fn)

        assert fn.await_count == 1

    async def test_gives_up_after_max_attempts(self) -> None:
        fn = AsyncMock(side_effect=StoreError("down", retryable=True))

        with pytest.raises(StoreError):
            await RetryPolicy(max_attempts=2, initial_wait=0, max_wait=0).run(fn)

        assert fn.await_count == 2

    async def test_last_error_propagates_unwrapped(self) -> None:
        last = StoreError("still down", status_code=503, retryable=True)
        fn = AsyncMock(side_effect=[StoreError("down", retryable=True), last])

        with pytest.raises(StoreError) as exc:
            await RetryPolicy(max_attempts=2, initial_wait=0, max_wait=0).run(fn)

        assert exc.value is last
