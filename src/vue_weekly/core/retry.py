"""Exponential backoff retry helper."""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

from vue_weekly.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    initial_delay: float = 1.0,
    should_retry: Optional[Callable[[Exception], bool]] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run operation, retrying failures with a doubling delay.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt.
        max_attempts: Total number of attempts, including the first one.
        initial_delay: Seconds to wait before the second attempt.
        should_retry: Predicate deciding whether an error is worth retrying.
            Errors it rejects are raised immediately.
        sleep: Awaitable sleep function, injectable for tests.

    Returns:
        The result of the first successful attempt.

    Raises:
        The last error, unchanged, once attempts are exhausted.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(1, max_attempts + 1):
        try:
            return await operation()
        except Exception as e:
            if should_retry is not None and not should_retry(e):
                raise
            if attempt == max_attempts:
                logger.error("retry_exhausted", attempts=max_attempts, error=str(e))
                raise

            delay = initial_delay * (2 ** (attempt - 1))
            logger.warning(
                "retry_scheduled",
                attempt=attempt,
                max_attempts=max_attempts,
                delay=delay,
                error=str(e),
            )
            await sleep(delay)

    raise RuntimeError("unreachable")
