"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import urlparse

if TYPE_CHECKING:
    from vue_weekly.core.interfaces import Resource

DEFAULT_PRIORITY = 3
MIN_PRIORITY = 1
MAX_PRIORITY = 5


class ContentCategory(str, Enum):
    """Section of the newsletter an item belongs to."""

    ARTICLES = "articles"
    REPOS = "repos"
    DISCUSSIONS = "discussions"
    NEWS = "news"


class ResourceKind(str, Enum):
    """Wire format of a configured source."""

    RSS = "rss"
    ATOM = "atom"
    JSON = "json"
    GITHUB = "github"
    CUSTOM = "custom"


def is_absolute_url(url: str) -> bool:
    """Check that url has an http(s) scheme and a host."""
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass
class Item:
    """Normalized unit of content produced by every source adapter."""

    title: str
    url: str
    source: str
    date: Optional[datetime] = None
    score: Optional[int] = None
    comments: Optional[int] = None
    description: Optional[str] = None
    stars: Optional[int] = None
    priority: int = DEFAULT_PRIORITY

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Title cannot be empty")
        if not self.url:
            raise ValueError("URL cannot be empty")
        if not is_absolute_url(self.url):
            raise ValueError(f"URL must be absolute: {self.url}")


@dataclass
class ResourceConfig:
    """Declarative description of one configured source."""

    id: str
    kind: ResourceKind
    url: str = ""
    limit: Optional[int] = None
    min_score: Optional[int] = None
    tag: Optional[str] = None
    priority: int = DEFAULT_PRIORITY

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Resource id cannot be empty")
        self.kind = ResourceKind(self.kind)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResourceConfig":
        """Build a config from a YAML/JSON mapping.

        Accepts both ``min_score`` and the camelCase ``minScore`` key.
        """
        min_score = data.get("min_score", data.get("minScore"))
        return cls(
            id=data.get("id", ""),
            kind=data.get("kind", ""),
            url=data.get("url") or "",
            limit=data.get("limit"),
            min_score=min_score,
            tag=data.get("tag"),
            priority=data.get("priority", DEFAULT_PRIORITY),
        )


@dataclass
class CollectedResult:
    """Outcome of one registry collection run."""

    results: dict[str, list[Item]] = field(default_factory=dict)
    errors: dict[str, Exception] = field(default_factory=dict)
    resources: list["Resource"] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def failed_ids(self) -> list[str]:
        return list(self.errors)


@dataclass
class LLMMessage:
    """Single chat message sent to an LLM backend.

    ``cache`` is a hint that the backend may cache this message server side.
    Backends without prompt caching ignore it.
    """

    role: str
    content: str
    cache: bool = False


@dataclass
class GenerateOptions:
    """Per-call generation options."""

    temperature: Optional[float] = None


@dataclass
class UsageMetrics:
    """Token usage reported by an LLM backend."""

    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None

    def to_dict(self) -> dict[str, int]:
        data = {
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
        }
        if self.cache_creation_input_tokens is not None:
            data["cache_creation_input_tokens"] = self.cache_creation_input_tokens
        if self.cache_read_input_tokens is not None:
            data["cache_read_input_tokens"] = self.cache_read_input_tokens
        return data


@dataclass
class LLMResponse:
    """Text and usage returned by a single generate() call."""

    text: str
    usage: UsageMetrics = field(default_factory=UsageMetrics)
