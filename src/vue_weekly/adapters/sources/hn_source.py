"""Hacker News stories via the Algolia search API."""

from typing import Optional
from urllib.parse import urlencode

from vue_weekly.adapters.fetch import http
from vue_weekly.adapters.fetch.parsers import parse_date
from vue_weekly.adapters.sources.base import ConfiguredResource
from vue_weekly.adapters.sources.schemas import HNSearchResponse
from vue_weekly.core import ContentCategory, Item, ResourceConfig

SEARCH_URL = "https://hn.algolia.com/api/v1/search"
DISCUSSION_URL = "https://news.ycombinator.com/item?id={object_id}"
DEFAULT_MIN_SCORE = 20


class HNResource(ConfiguredResource):
    """Fetch popular Hacker News stories matching a query."""

    category = ContentCategory.DISCUSSIONS
    default_limit = 10

    def __init__(self, config: ResourceConfig, timeout: Optional[float] = None) -> None:
        super().__init__(config, timeout)
        self.source = "Hacker News"
        self.min_score = config.min_score if config.min_score is not None else DEFAULT_MIN_SCORE
        if not self.url:
            query = urlencode({"query": config.tag or "vue", "tags": "story"})
            self.url = f"{SEARCH_URL}?{query}"

    async def fetch(self) -> list[Item]:
        payload = await http.get_json(self.url, **self._request_kwargs())
        data = self._validate(HNSearchResponse, payload)

        items: list[Item] = []
        for story in data.hits:
            if story.points < self.min_score:
                continue
            # Ask HN / Show HN posts have no external link
            url = story.url or DISCUSSION_URL.format(object_id=story.object_id)
            item = self._make_item(
                story.title,
                url,
                score=story.points,
                comments=story.num_comments,
                date=parse_date(story.created_at),
            )
            if item is not None:
                items.append(item)

        items.sort(key=lambda item: item.score or 0, reverse=True)
        return items[:self.limit]
