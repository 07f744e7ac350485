"""Generic RSS 2.0 feed source."""

from vue_weekly.adapters.fetch import http
from vue_weekly.adapters.fetch.parsers import parse_date, parse_rss_items
from vue_weekly.adapters.sources.base import ConfiguredResource
from vue_weekly.adapters.sources.schemas import RSSEntries
from vue_weekly.core import ContentCategory, Item


class RSSResource(ConfiguredResource):
    """Fetch news posts from an RSS feed, keeping feed order."""

    category = ContentCategory.NEWS
    default_limit = 10
    default_source = "RSS"

    async def fetch(self) -> list[Item]:
        xml_content = await http.get_text(self.url, **self._request_kwargs())
        raw_entries = self._parse_feed(parse_rss_items, xml_content)
        entries = self._validate(RSSEntries, raw_entries)

        items: list[Item] = []
        for entry in entries:
            item = self._make_item(entry.title, entry.link, date=parse_date(entry.pub_date))
            if item is not None:
                items.append(item)

        return items[:self.limit]
