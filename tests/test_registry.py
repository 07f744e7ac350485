"""Tests for the resource registry."""

import asyncio

import pytest
from structlog.testing import capture_logs

from vue_weekly.adapters.sources import (
    DevToResource,
    GitHubSearchResource,
    HNResource,
    RedditResource,
    ResourceRegistry,
    RSSResource,
)
from vue_weekly.core import ContentCategory, HttpError, Item, Resource, ResourceConfig

from factories import rss_feed

RSS_URL = "https://blog.vuejs.org/feed.rss"
REDDIT_URL = "https://www.reddit.com/r/vuejs.rss"


class StaticResource(Resource):
    """Custom resource returning fixed items."""

    category = ContentCategory.NEWS

    def __init__(self, resource_id: str, items=None, error=None, delay: float = 0.0) -> None:
        self.id = resource_id
        self.priority = 3
        self.items = items or []
        self.error = error
        self.delay = delay

    async def fetch(self) -> list[Item]:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.items


@pytest.mark.parametrize(
    "config, expected_type",
    [
        (ResourceConfig(id="blog", kind="rss", url=RSS_URL), RSSResource),
        (ResourceConfig(id="reddit-vuejs", kind="atom", url=REDDIT_URL), RedditResource),
        (ResourceConfig(id="hn-vue", kind="json"), HNResource),
        (ResourceConfig(id="devto-vue", kind="json", url="https://dev.to/api/articles?tag=vue"), DevToResource),
        (ResourceConfig(id="github-vue", kind="github", url="https://api.github.com/search/repositories?q=vue"), GitHubSearchResource),
    ],
)
def test_register_dispatches_on_kind(config, expected_type) -> None:
    registry = ResourceRegistry().register(config)

    assert isinstance(registry.resources[0], expected_type)


def test_register_passes_github_token() -> None:
    registry = ResourceRegistry(github_token="ghp_secret")
    registry.register(ResourceConfig(id="github-vue", kind="github", url="https://api.github.com/x"))

    assert registry.resources[0].token == "ghp_secret"


def test_unrecognised_json_id_is_rejected() -> None:
    with pytest.raises(ValueError, match="'lobsters'"):
        ResourceRegistry().register(ResourceConfig(id="lobsters", kind="json", url="https://lobste.rs/t/vue.json"))


def test_custom_kind_requires_add() -> None:
    registry = ResourceRegistry()

    with pytest.raises(ValueError, match="add()"):
        registry.register(ResourceConfig(id="mine", kind="custom"))

    registry.add(StaticResource("mine"))
    assert [r.id for r in registry.resources] == ["mine"]


def test_duplicate_ids_are_rejected() -> None:
    registry = ResourceRegistry().register(ResourceConfig(id="blog", kind="rss", url=RSS_URL))

    with pytest.raises(ValueError, match="Duplicate resource id: blog"):
        registry.register(ResourceConfig(id="blog", kind="rss", url="https://other.dev/feed"))


@pytest.mark.asyncio
async def test_collect_isolates_failures(http_routes) -> None:
    http_routes.add_text(RSS_URL, rss_feed([{"title": "Post", "link": "https://blog.vuejs.org/post"}]))
    http_routes.add_status(REDDIT_URL, 503)
    registry = (
        ResourceRegistry()
        .register(ResourceConfig(id="blog", kind="rss", url=RSS_URL))
        .register(ResourceConfig(id="reddit-vuejs", kind="atom", url=REDDIT_URL))
    )

    with capture_logs() as logs:
        collected = await registry.collect()

    assert len(collected.results["blog"]) == 1
    assert collected.results["reddit-vuejs"] == []
    assert list(collected.errors) == ["reddit-vuejs"]
    assert isinstance(collected.errors["reddit-vuejs"], HttpError)
    assert collected.errors["reddit-vuejs"].status_code == 503

    failed = [log for log in logs if log["event"] == "resource_fetch_failed"]
    assert failed[0]["resource_id"] == "reddit-vuejs"
    assert failed[0]["error_type"] == "HttpError"


@pytest.mark.asyncio
async def test_collect_waits_for_every_resource() -> None:
    slow_item = Item(title="Slow", url="https://example.com/slow", source="test")
    registry = (
        ResourceRegistry()
        .add(StaticResource("fails-fast", error=RuntimeError("boom")))
        .add(StaticResource("slow", items=[slow_item], delay=0.01))
    )

    collected = await registry.collect()

    assert collected.results == {"fails-fast": [], "slow": [slow_item]}
    assert str(collected.errors["fails-fast"]) == "boom"
    assert [r.id for r in collected.resources] == ["fails-fast", "slow"]


@pytest.mark.asyncio
async def test_collect_with_no_resources() -> None:
    collected = await ResourceRegistry().collect()

    assert collected.results == {}
    assert not collected.has_errors
