"""Opt-in retry helper for callers of :class:`~gitcore.client.GitClient`.

The core never retries on its own. Callers that want to ride out transient
failures (network hiccups, ref lock contention) wrap a call::

    result = await retry_classified(lambda: client.fetch(options, context))

Only errors whose ``retryable`` property is true are retried; the wait before
each retry starts at the error's ``retry_delay_ms`` and doubles per attempt.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
)

from gitcore.exceptions import ClassifiedError
from gitcore.logging import get_logger

__all__ = ["MAX_RETRY_DELAY_SECONDS", "retry_classified"]

logger = get_logger(__name__)

T = TypeVar("T")

MAX_RETRY_DELAY_SECONDS: float = 30.0


def _is_retryable(error: BaseException) -> bool:
    return isinstance(error, ClassifiedError) and error.retryable


def _classified_wait(retry_state: RetryCallState) -> float:
    """Exponential wait seeded by the raised error's suggested delay."""
    outcome = retry_state.outcome
    error = outcome.exception() if outcome is not None else None
    base_ms = error.retry_delay_ms if isinstance(error, ClassifiedError) else 0
    delay = (base_ms / 1000.0) * (2 ** (retry_state.attempt_number - 1))
    return min(delay, MAX_RETRY_DELAY_SECONDS)


def _log_retry(retry_state: RetryCallState) -> None:
    outcome = retry_state.outcome
    error = outcome.exception() if outcome is not None else None
    logger.info(
        "git_operation_retrying",
        attempt=retry_state.attempt_number,
        category=getattr(getattr(error, "category", None), "value", None),
        wait_seconds=retry_state.upcoming_sleep,
    )


async def retry_classified(
    call: Callable[[], Awaitable[T]],
    *,
    max_attempts: int = 3,
) -> T:
    """Await ``call()``, retrying retryable :class:`ClassifiedError` failures.

    Args:
        call: Zero-argument callable returning a fresh awaitable per attempt.
        max_attempts: Total attempts including the first.

    Returns:
        The value of the first successful attempt.

    Raises:
        ClassifiedError: The last error, once attempts are exhausted or as
            soon as a non-retryable error is raised.
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=_classified_wait,
        retry=retry_if_exception(_is_retryable),
        before_sleep=_log_retry,
        reraise=True,
    ):
        with attempt:
            return await call()
    raise AssertionError("unreachable")  # pragma: no cover
