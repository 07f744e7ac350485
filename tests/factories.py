"""Payload builders for source fixtures."""

from typing import Any


def rss_feed(items: list[dict[str, str]]) -> str:
    """Build an RSS 2.0 document from title/link/pubDate dicts."""
    body = "".join(
        f"<item><title>{i.get('title', '')}</title><link>{i.get('link', '')}</link>"
        f"<pubDate>{i.get('pubDate', '')}</pubDate><description>desc</description></item>"
        for i in items
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<rss version=\"2.0\"><channel><title>Feed</title>{body}</channel></rss>"
    )


def atom_feed(entries: list[dict[str, str]]) -> str:
    """Build an Atom document in the shape Reddit serves."""
    body = "".join(
        f"<entry><title>{e.get('title', '')}</title><link href=\"{e.get('link', '')}\"/>"
        f"<updated>{e.get('updated', '')}</updated></entry>"
        for e in entries
    )
    return f'<?xml version="1.0" encoding="UTF-8"?><feed xmlns="http://www.w3.org/2005/Atom">{body}</feed>'


def devto_article(index: int, reactions: int, **overrides: Any) -> dict[str, Any]:
    article = {
        "id": 1000 + index,
        "title": f"Article {index}",
        "url": f"https://dev.to/someone/article-{index}",
        "published_at": "2025-01-01T00:00:00Z",
        "public_reactions_count": reactions,
        "comments_count": 5,
        "tag_list": ["vue", "javascript"],
        "user": {"name": "Someone"},
    }
    article.update(overrides)
    return article


def hn_story(object_id: str, points: int, **overrides: Any) -> dict[str, Any]:
    story = {
        "objectID": object_id,
        "title": f"Story {object_id}",
        "url": f"https://example.com/story-{object_id}",
        "points": points,
        "num_comments": 12,
        "author": "pg",
        "created_at": "2025-01-02T10:00:00Z",
    }
    story.update(overrides)
    return story


def github_repo(name: str, stars: int, **overrides: Any) -> dict[str, Any]:
    repo = {
        "name": name,
        "html_url": f"https://github.com/vuejs/{name}",
        "description": f"{name} description",
        "stargazers_count": stars,
        "pushed_at": "2025-01-03T08:00:00Z",
        "language": "TypeScript",
    }
    repo.update(overrides)
    return repo
