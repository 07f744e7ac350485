"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from vue_weekly.core.entities import (
    ContentCategory,
    GenerateOptions,
    Item,
    LLMMessage,
    LLMResponse,
)


class Resource(ABC):
    """Interface for a configured content source."""

    id: str
    category: ContentCategory
    priority: int

    @abstractmethod
    async def fetch(self) -> list[Item]:
        """Fetch, validate and normalize items from the source."""
        pass


class LLMClient(ABC):
    """Interface for interchangeable LLM backends."""

    name: str
    model: str

    @abstractmethod
    async def generate(
        self, messages: list[LLMMessage], options: Optional[GenerateOptions] = None
    ) -> LLMResponse:
        """Generate a completion for the given messages."""
        pass
