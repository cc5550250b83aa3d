from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_random_exponential

from tasktrack.core.application.exceptions import StoreError

_T = TypeVar("_T")


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, StoreError) and exc.retryable


@dataclass(frozen=True)
class RetryPolicy:
    """Caller-side retry for read-only store calls. Writes are never retried.

    Once attempts run out the last ``StoreError`` propagates unchanged.
    """

    max_attempts: int = 1  # Default: fail fast
    initial_wait: float = 0.25
    max_wait: float = 5.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        return await self._retrying()(fn)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_random_exponential(multiplier=self.initial_wait, max=self.max_wait),
            reraise=True,
        )
