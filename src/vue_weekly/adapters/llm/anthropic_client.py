"""Anthropic Messages API backend."""

from typing import Any, Optional

import httpx

from vue_weekly.core import (
    GenerateOptions,
    LLMClient,
    LLMMessage,
    LLMResponse,
    ProviderError,
    UsageMetrics,
)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.2


def error_message(response: httpx.Response) -> str:
    """Pull a readable message out of an API error response."""
    try:
        body = response.json()
        return str(body["error"]["message"])
    except (ValueError, KeyError, TypeError):
        return str(response.text)[:200] or f"HTTP {response.status_code}"


def is_retryable_status(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


class AnthropicClient(LLMClient):
    """Claude API client implementation."""

    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float = 60.0,
    ) -> None:
        if not api_key:
            raise ValueError(
                "Anthropic API key is required. Provide it via settings or the "
                "ANTHROPIC_API_KEY environment variable."
            )
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.base_url = "https://api.anthropic.com/v1"

    async def generate(
        self, messages: list[LLMMessage], options: Optional[GenerateOptions] = None
    ) -> LLMResponse:
        """Send messages to the Messages API and return text plus usage."""
        temperature = self.temperature
        if options is not None and options.temperature is not None:
            temperature = options.temperature

        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": temperature,
            "system": self._build_system(messages),
            "messages": [
                {"role": m.role, "content": m.content}
                for m in messages
                if m.role in ("user", "assistant")
            ],
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/messages",
                    headers={
                        "x-api-key": self.api_key,
                        "anthropic-version": "2023-06-01",
                        "content-type": "application/json",
                    },
                    json=payload,
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

        return self._parse_response(data)

    def _build_system(self, messages: list[LLMMessage]) -> Any:
        """Build the system field, as a cacheable text block when asked to."""
        system_messages = [m for m in messages if m.role == "system"]
        text = "\n\n".join(m.content for m in system_messages)

        if any(m.cache for m in system_messages):
            return [{
                "type": "text",
                "text": text,
                "cache_control": {"type": "ephemeral"},
            }]
        return text

    def _parse_response(self, data: Any) -> LLMResponse:
        if not isinstance(data, dict):
            raise ProviderError(self.name, "Response was not a JSON object")

        text = next(
            (
                block.get("text")
                for block in data.get("content") or []
                if isinstance(block, dict) and block.get("type") == "text"
            ),
            None,
        )
        if text is None:
            raise ProviderError(self.name, "Response contained no text content")

        usage = data.get("usage") or {}
        return LLMResponse(
            text=text,
            usage=UsageMetrics(
                input_tokens=usage.get("input_tokens", 0),
                output_tokens=usage.get("output_tokens", 0),
                cache_creation_input_tokens=usage.get("cache_creation_input_tokens"),
                cache_read_input_tokens=usage.get("cache_read_input_tokens"),
            ),
        )
