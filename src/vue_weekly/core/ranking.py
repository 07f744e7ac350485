"""Category grouping and ranking of collected items."""

from vue_weekly.core.entities import (
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    CollectedResult,
    ContentCategory,
    Item,
)

ARTICLE_LIMIT = 10
DISCUSSION_LIMIT = 10


def group_by_category(collected: CollectedResult) -> dict[ContentCategory, list[Item]]:
    """Partition collected items by the static category of their resource.

    Every category is present in the result, empty or not. Items keep the
    resource registration order, then fetch order.
    """
    grouped: dict[ContentCategory, list[Item]] = {category: [] for category in ContentCategory}

    for resource in collected.resources:
        grouped[resource.category].extend(collected.results.get(resource.id, []))

    return grouped


def effective_priority(item: Item) -> int:
    """Item priority, with anything outside 1..5 ranked as the default."""
    priority = item.priority
    if isinstance(priority, int) and not isinstance(priority, bool) and MIN_PRIORITY <= priority <= MAX_PRIORITY:
        return priority
    return DEFAULT_PRIORITY


def select_articles(items: list[Item], limit: int = ARTICLE_LIMIT) -> list[Item]:
    """Pick up to limit articles, priority first, then score.

    Levels are consulted from the most important (5) down. Within a level
    items are ordered by score descending, a missing score counting as 0.
    Lower levels only fill slots the higher ones left free.
    """
    selected: list[Item] = []

    for priority in range(MAX_PRIORITY, MIN_PRIORITY - 1, -1):
        needed = limit - len(selected)
        if needed <= 0:
            break

        at_priority = [item for item in items if effective_priority(item) == priority]
        at_priority.sort(key=lambda item: item.score or 0, reverse=True)
        selected.extend(at_priority[:needed])

    return selected


def sort_by_date_desc(items: list[Item]) -> list[Item]:
    """Newest first; undated items go last in their original order."""
    return sorted(
        items,
        key=lambda item: item.date.timestamp() if item.date else float("-inf"),
        reverse=True,
    )


def order_discussions(items: list[Item], limit: int = DISCUSSION_LIMIT) -> list[Item]:
    """Newest discussions first, capped at limit."""
    return sort_by_date_desc(items)[:limit]


def rank_sections(
    grouped: dict[ContentCategory, list[Item]],
    article_limit: int = ARTICLE_LIMIT,
    discussion_limit: int = DISCUSSION_LIMIT,
) -> dict[ContentCategory, list[Item]]:
    """Apply the per-category ordering policy.

    News and repositories keep the fetched order.
    """
    return {
        ContentCategory.NEWS: list(grouped.get(ContentCategory.NEWS, [])),
        ContentCategory.REPOS: list(grouped.get(ContentCategory.REPOS, [])),
        ContentCategory.DISCUSSIONS: order_discussions(
            grouped.get(ContentCategory.DISCUSSIONS, []), discussion_limit
        ),
        ContentCategory.ARTICLES: select_articles(
            grouped.get(ContentCategory.ARTICLES, []), article_limit
        ),
    }
