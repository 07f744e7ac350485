"""Payload schemas the source adapters validate against."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class RSSEntry(BaseModel):
    """One parsed RSS ``<item>``."""

    title: str
    link: str
    pub_date: str = Field(alias="pubDate")


class AtomEntry(BaseModel):
    """One parsed Atom ``<entry>``."""

    title: str
    link: str
    updated: str


class HNStory(BaseModel):
    """Hacker News story hit from the Algolia search API."""

    object_id: str = Field(alias="objectID")
    title: str
    url: Optional[str] = None
    points: int
    num_comments: Optional[int] = None
    author: str
    created_at: str


class HNSearchResponse(BaseModel):
    hits: list[HNStory]


class DevToUser(BaseModel):
    name: Optional[str] = None


class DevToArticle(BaseModel):
    """Article from the DEV.to articles API."""

    id: int
    title: str
    url: str
    published_at: Optional[str] = None
    public_reactions_count: int
    comments_count: int
    tag_list: list[str] = Field(default_factory=list)
    user: Optional[DevToUser] = None

    @field_validator("tag_list", mode="before")
    @classmethod
    def split_tag_string(cls, value: Union[str, list[str], None]) -> list[str]:
        # Single-article endpoint returns tags as "vue, javascript"
        if value is None:
            return []
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return value


class GitHubRepo(BaseModel):
    """Repository entry from the GitHub search API."""

    model_config = ConfigDict(extra="ignore")

    name: str
    html_url: str
    description: Optional[str] = None
    stargazers_count: int
    pushed_at: str
    language: Optional[str] = None


class GitHubSearchResponse(BaseModel):
    items: list[GitHubRepo]


RSSEntries = TypeAdapter(list[RSSEntry])
AtomEntries = TypeAdapter(list[AtomEntry])
DevToArticles = TypeAdapter(list[DevToArticle])
