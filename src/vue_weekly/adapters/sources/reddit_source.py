"""Reddit subreddit source via its Atom feed."""

import re
from typing import Optional
from urllib.parse import urlparse

from vue_weekly.adapters.fetch import http
from vue_weekly.adapters.fetch.parsers import parse_atom_entries, parse_date
from vue_weekly.adapters.sources.base import ConfiguredResource
from vue_weekly.adapters.sources.schemas import AtomEntries
from vue_weekly.core import ContentCategory, Item, ResourceConfig
from vue_weekly.core.ranking import sort_by_date_desc

USER_AGENT = "Vue-Newsletter-Generator/1.0"
DEFAULT_SUBREDDIT = "vuejs"

_SUBREDDIT_RE = re.compile(r"/r/([^/.?#]+)")


def subreddit_from_url(url: str) -> Optional[str]:
    """Extract the subreddit name from a ``/r/<name>`` URL path."""
    match = _SUBREDDIT_RE.search(urlparse(url).path)
    return match.group(1) if match else None


class RedditResource(ConfiguredResource):
    """Fetch recent posts of a subreddit.

    The configured URL is requested as-is. The ``source`` label is always
    derived from that URL, never from the configured tag, so the label
    cannot drift from the feed actually fetched.
    """

    category = ContentCategory.DISCUSSIONS
    default_limit = 10

    def __init__(self, config: ResourceConfig, timeout: Optional[float] = None) -> None:
        super().__init__(config, timeout)
        if not self.url:
            self.url = f"https://www.reddit.com/r/{config.tag or DEFAULT_SUBREDDIT}.rss"
        subreddit = subreddit_from_url(self.url)
        self.source = f"r/{subreddit}" if subreddit else "Reddit"

    async def fetch(self) -> list[Item]:
        # Reddit blocks default client user agents
        xml_content = await http.get_text(
            self.url, headers={"User-Agent": USER_AGENT}, **self._request_kwargs()
        )
        raw_entries = self._parse_feed(parse_atom_entries, xml_content)
        entries = self._validate(AtomEntries, raw_entries)

        items: list[Item] = []
        for entry in entries:
            item = self._make_item(entry.title, entry.link, date=parse_date(entry.updated))
            if item is not None:
                items.append(item)

        return sort_by_date_desc(items)[:self.limit]
