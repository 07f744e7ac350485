"""Pick an LLM backend from settings."""

from vue_weekly.adapters.llm.anthropic_client import AnthropicClient
from vue_weekly.adapters.llm.openai_client import OpenAIClient
from vue_weekly.adapters.llm.retrying import RetryingLLMClient
from vue_weekly.config import Settings
from vue_weekly.core import LLMClient


def create_llm_client(settings: Settings) -> LLMClient:
    """Build the configured backend, wrapped for retries when enabled."""
    llm = settings.llm
    provider = llm.provider.lower()

    client: LLMClient
    if provider == "anthropic":
        client = AnthropicClient(
            api_key=settings.anthropic_api_key,
            model=llm.model,
            max_tokens=llm.max_tokens,
            temperature=llm.temperature,
            timeout=llm.timeout,
        )
    elif provider == "openai":
        client = OpenAIClient(
            api_key=settings.openai_api_key,
            model=llm.model,
            max_tokens=llm.max_tokens,
            temperature=llm.temperature,
            timeout=llm.timeout,
        )
    else:
        raise ValueError(f"Unknown provider: {llm.provider}. Must be 'anthropic' or 'openai'")

    if llm.max_retries > 1:
        client = RetryingLLMClient(
            client, max_attempts=llm.max_retries, initial_delay=llm.initial_retry_delay
        )
    return client
