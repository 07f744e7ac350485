"""Registry of configured resources with failure-isolated collection."""

import asyncio
from typing import Optional

from vue_weekly.adapters.sources.devto_source import DevToResource
from vue_weekly.adapters.sources.github_source import GitHubSearchResource
from vue_weekly.adapters.sources.hn_source import HNResource
from vue_weekly.adapters.sources.reddit_source import RedditResource
from vue_weekly.adapters.sources.rss_source import RSSResource
from vue_weekly.core import CollectedResult, Item, Resource, ResourceConfig, ResourceKind
from vue_weekly.logging import get_logger

logger = get_logger(__name__)


class ResourceRegistry:
    """Own the configured resources of one pipeline run."""

    def __init__(self, timeout: Optional[float] = None, github_token: Optional[str] = None) -> None:
        self.timeout = timeout
        self.github_token = github_token
        self.resources: list[Resource] = []

    def register(self, config: ResourceConfig) -> "ResourceRegistry":
        """Build the adapter matching config.kind and add it."""
        return self.add(self._build(config))

    def add(self, resource: Resource) -> "ResourceRegistry":
        """Add an already constructed resource, e.g. a custom source."""
        if any(existing.id == resource.id for existing in self.resources):
            raise ValueError(f"Duplicate resource id: {resource.id}")
        self.resources.append(resource)
        return self

    def _build(self, config: ResourceConfig) -> Resource:
        kind = config.kind
        if kind == ResourceKind.RSS:
            return RSSResource(config, self.timeout)
        if kind == ResourceKind.ATOM:
            return RedditResource(config, self.timeout)
        if kind == ResourceKind.GITHUB:
            return GitHubSearchResource(config, self.timeout, token=self.github_token)
        if kind == ResourceKind.JSON:
            if config.id.startswith("hn"):
                return HNResource(config, self.timeout)
            if config.id.startswith("devto-"):
                return DevToResource(config, self.timeout)
            raise ValueError(
                f"Cannot tell which JSON API {config.id!r} is; "
                "ids must start with 'hn' or 'devto-'"
            )
        if kind == ResourceKind.CUSTOM:
            raise ValueError(f"Custom resource {config.id!r} must be added with add()")
        raise ValueError(f"Unknown kind {kind}")

    async def collect(self) -> CollectedResult:
        """Fetch every resource concurrently and wait for all of them.

        A failing resource yields an empty list under its id and an entry in
        ``errors``; it never aborts the others.
        """
        outcomes = await asyncio.gather(
            *(resource.fetch() for resource in self.resources),
            return_exceptions=True,
        )

        collected = CollectedResult(resources=list(self.resources))
        for resource, outcome in zip(self.resources, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error(
                    "resource_fetch_failed",
                    resource_id=resource.id,
                    error_type=type(outcome).__name__,
                    error=str(outcome),
                )
                collected.results[resource.id] = []
                collected.errors[resource.id] = outcome
                continue

            items: list[Item] = outcome
            collected.results[resource.id] = items
            logger.info("resource_fetched", resource_id=resource.id, count=len(items))

        return collected
