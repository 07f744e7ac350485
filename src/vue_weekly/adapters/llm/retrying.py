"""Retry decorator for LLM backends."""

import asyncio
from typing import Awaitable, Callable, Optional

from vue_weekly.core import GenerateOptions, LLMClient, LLMMessage, LLMResponse, ProviderError
from vue_weekly.core.retry import retry_with_backoff


def is_retryable(error: Exception) -> bool:
    """Only transient provider failures (rate limit, 5xx, network) are retried."""
    return isinstance(error, ProviderError) and error.retryable


class RetryingLLMClient(LLMClient):
    """Wrap another LLMClient and retry transient failures with backoff."""

    def __init__(
        self,
        inner: LLMClient,
        max_attempts: int = 3,
        initial_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.inner = inner
        self.name = inner.name
        self.model = inner.model
        self.max_attempts = max_attempts
        self.initial_delay = initial_delay
        self._sleep = sleep

    async def generate(
        self, messages: list[LLMMessage], options: Optional[GenerateOptions] = None
    ) -> LLMResponse:
        return await retry_with_backoff(
            lambda: self.inner.generate(messages, options),
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
            should_retry=is_retryable,
            sleep=self._sleep,
        )
