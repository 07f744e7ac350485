"""DEV.to articles source."""

from vue_weekly.adapters.fetch import http
from vue_weekly.adapters.fetch.parsers import parse_date
from vue_weekly.adapters.sources.base import ConfiguredResource
from vue_weekly.adapters.sources.schemas import DevToArticles
from vue_weekly.core import ContentCategory, Item


class DevToResource(ConfiguredResource):
    """Fetch DEV.to articles, most reacted first."""

    category = ContentCategory.ARTICLES
    default_limit = 10
    default_source = "DEV.to"

    async def fetch(self) -> list[Item]:
        payload = await http.get_json(self.url, **self._request_kwargs())
        articles = self._validate(DevToArticles, payload)

        articles = sorted(articles, key=lambda a: a.public_reactions_count, reverse=True)

        items: list[Item] = []
        for article in articles:
            tags = " ".join(f"#{tag}" for tag in article.tag_list) or None
            item = self._make_item(
                article.title,
                article.url,
                date=parse_date(article.published_at),
                score=article.public_reactions_count,
                comments=article.comments_count,
                description=tags,
            )
            if item is not None:
                items.append(item)

        return items[:self.limit]
