"""Source adapters for fetching items."""

from vue_weekly.adapters.sources.devto_source import DevToResource
from vue_weekly.adapters.sources.github_source import GitHubSearchResource
from vue_weekly.adapters.sources.hn_source import HNResource
from vue_weekly.adapters.sources.reddit_source import RedditResource
from vue_weekly.adapters.sources.registry import ResourceRegistry
from vue_weekly.adapters.sources.rss_source import RSSResource

__all__ = [
    "RSSResource",
    "RedditResource",
    "HNResource",
    "DevToResource",
    "GitHubSearchResource",
    "ResourceRegistry",
]
