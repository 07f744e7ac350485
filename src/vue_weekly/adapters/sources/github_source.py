"""GitHub repository search source."""

from typing import Optional

from vue_weekly.adapters.fetch import http
from vue_weekly.adapters.fetch.parsers import parse_date
from vue_weekly.adapters.sources.base import ConfiguredResource
from vue_weekly.adapters.sources.schemas import GitHubSearchResponse
from vue_weekly.core import ContentCategory, Item, ResourceConfig


class GitHubSearchResource(ConfiguredResource):
    """Fetch repositories from a GitHub search query URL.

    The full search query (topic, sort order, date window) is part of the
    configured URL; results are kept in the order GitHub returns them.
    """

    category = ContentCategory.REPOS
    default_limit = 5

    def __init__(
        self,
        config: ResourceConfig,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
    ) -> None:
        super().__init__(config, timeout)
        self.source = "GitHub"
        self.token = token

    async def fetch(self) -> list[Item]:
        payload = await http.get_json(self.url, headers=self._get_headers(), **self._request_kwargs())
        data = self._validate(GitHubSearchResponse, payload)

        items: list[Item] = []
        for repo in data.items:
            item = self._make_item(
                repo.name,
                repo.html_url,
                description=repo.description or "No description",
                stars=repo.stargazers_count,
                date=parse_date(repo.pushed_at),
            )
            if item is not None:
                items.append(item)

        return items[:self.limit]

    def _get_headers(self) -> dict[str, str]:
        """Get headers for GitHub API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        return headers
