"""Core domain layer."""

from vue_weekly.core.entities import (
    CollectedResult,
    ContentCategory,
    GenerateOptions,
    Item,
    LLMMessage,
    LLMResponse,
    ResourceConfig,
    ResourceKind,
    UsageMetrics,
)
from vue_weekly.core.exceptions import (
    AggregateCollectionError,
    FeedParseError,
    HttpError,
    NewsletterError,
    ProviderError,
    RequestTimeoutError,
    ResourceValidationError,
)
from vue_weekly.core.interfaces import LLMClient, Resource

__all__ = [
    "Item",
    "ResourceConfig",
    "ResourceKind",
    "ContentCategory",
    "CollectedResult",
    "LLMMessage",
    "LLMResponse",
    "GenerateOptions",
    "UsageMetrics",
    "Resource",
    "LLMClient",
    "NewsletterError",
    "HttpError",
    "RequestTimeoutError",
    "FeedParseError",
    "ResourceValidationError",
    "ProviderError",
    "AggregateCollectionError",
]
