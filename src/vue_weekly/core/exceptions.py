"""Error taxonomy for the aggregation pipeline."""

from typing import Any, Optional


class NewsletterError(Exception):
    """Base class for all pipeline errors."""


class HttpError(NewsletterError):
    """Remote endpoint answered with a non-success status."""

    def __init__(self, status_code: int, status_text: str, url: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        super().__init__(f"{status_code} {status_text} for {url}")


class RequestTimeoutError(NewsletterError, TimeoutError):
    """Request did not complete before its deadline."""

    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"Request to {url} timed out after {timeout:g}s")


class FeedParseError(NewsletterError):
    """XML feed could not be parsed structurally."""


class ResourceValidationError(NewsletterError):
    """Well-formed response that does not match the expected schema."""

    def __init__(self, resource_id: str, issues: Optional[list[Any]] = None) -> None:
        self.resource_id = resource_id
        self.issues = issues or []
        super().__init__(f"Resource validation failed for {resource_id}")


class ProviderError(NewsletterError):
    """LLM backend call failed or returned an unusable response."""

    def __init__(
        self,
        provider: str,
        message: str,
        status_code: Optional[int] = None,
        retryable: bool = False,
    ) -> None:
        self.provider = provider
        self.message = message
        self.status_code = status_code
        self.retryable = retryable
        prefix = f"{provider} error"
        if status_code is not None:
            prefix = f"{prefix} ({status_code})"
        super().__init__(f"{prefix}: {message}")


class AggregateCollectionError(NewsletterError):
    """One or more resources failed during collection."""

    def __init__(self, errors: dict[str, Exception]) -> None:
        self.errors = dict(errors)
        lines = "\n".join(f"  - [{resource_id}] {error}" for resource_id, error in self.errors.items())
        super().__init__(
            f"Newsletter generation failed. {len(self.errors)} resource(s) failed:\n{lines}"
        )
