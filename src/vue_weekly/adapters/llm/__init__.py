"""LLM backends."""

from vue_weekly.adapters.llm.anthropic_client import AnthropicClient
from vue_weekly.adapters.llm.factory import create_llm_client
from vue_weekly.adapters.llm.openai_client import OpenAIClient
from vue_weekly.adapters.llm.retrying import RetryingLLMClient

__all__ = ["AnthropicClient", "OpenAIClient", "RetryingLLMClient", "create_llm_client"]
