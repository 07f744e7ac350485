"""OpenAI Chat Completions backend."""

from typing import Optional

import httpx

from vue_weekly.adapters.llm.anthropic_client import error_message, is_retryable_status
from vue_weekly.core import (
    GenerateOptions,
    LLMClient,
    LLMMessage,
    LLMResponse,
    ProviderError,
    UsageMetrics,
)

DEFAULT_MODEL = "gpt-4o-mini"


class OpenAIClient(LLMClient):
    """OpenAI API client implementation.

    Prompt caching is automatic on OpenAI's side, so the ``cache`` hint on
    messages is not sent.
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        max_tokens: int = 4096,
        temperature: float = 0.2,
        timeout: float = 60.0,
    ) -> None:
        if not api_key:
            raise ValueError(
                "OpenAI API key is required. Provide it via settings or the "
                "OPENAI_API_KEY environment variable."
            )
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.base_url = "https://api.openai.com/v1"

    async def generate(
        self, messages: list[LLMMessage], options: Optional[GenerateOptions] = None
    ) -> LLMResponse:
        temperature = self.temperature
        if options is not None and options.temperature is not None:
            temperature = options.temperature

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json={
                        "model": self.model,
                        "temperature": temperature,
                        "max_tokens": self.max_tokens,
                        "messages": [{"role": m.role, "content": m.content} for m in messages],
                    },
                )
        except httpx.RequestError as e:
            raise ProviderError(self.name, str(e) or type(e).__name__, retryable=True) from e

        if response.status_code != 200:
            raise ProviderError(
                self.name,
                error_message(response),
                status_code=response.status_code,
                retryable=is_retryable_status(response.status_code),
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(self.name, "Response was not valid JSON", status_code=response.status_code) from e

        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(self.name, "Response contained no choices") from e
        if text is None:
            raise ProviderError(self.name, "Response contained no text content")

        usage = data.get("usage") or {}
        cached = (usage.get("prompt_tokens_details") or {}).get("cached_tokens")
        return LLMResponse(
            text=text,
            usage=UsageMetrics(
                input_tokens=usage.get("prompt_tokens", 0),
                output_tokens=usage.get("completion_tokens", 0),
                cache_read_input_tokens=cached,
            ),
        )
