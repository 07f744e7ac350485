"""Tests for grouping and ranking."""

from datetime import datetime, timedelta, timezone

import pytest

from vue_weekly.core import CollectedResult, ContentCategory, Item
from vue_weekly.core.ranking import (
    group_by_category,
    order_discussions,
    rank_sections,
    select_articles,
    sort_by_date_desc,
)

BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)


def article(name: str, priority: int = 3, score=None) -> Item:
    return Item(title=name, url=f"https://dev.to/{name}", source="DEV.to", priority=priority, score=score)


def discussion(name: str, days=None) -> Item:
    date = BASE + timedelta(days=days) if days is not None else None
    return Item(title=name, url=f"https://reddit.com/{name}", source="r/vuejs", date=date)


class FakeResource:
    def __init__(self, resource_id: str, category: ContentCategory) -> None:
        self.id = resource_id
        self.category = category


def test_higher_priority_always_wins_over_score() -> None:
    items = [
        article("low-popular", priority=3, score=1000),
        article("high-quiet", priority=4, score=1),
    ]

    selected = select_articles(items, limit=1)

    assert [i.title for i in selected] == ["high-quiet"]


def test_select_articles_truncates_and_orders_by_score() -> None:
    items = [article(f"a{n}", priority=3, score=n) for n in range(15)]

    selected = select_articles(items)

    assert len(selected) == 10
    assert [i.score for i in selected] == list(range(14, 4, -1))


def test_lower_priorities_fill_remaining_slots() -> None:
    items = [
        article("p1", priority=1, score=50),
        article("p5", priority=5),
        article("p3-b", priority=3, score=2),
        article("p3-a", priority=3, score=9),
    ]

    selected = select_articles(items, limit=3)

    assert [i.title for i in selected] == ["p5", "p3-a", "p3-b"]


def test_missing_score_counts_as_zero() -> None:
    items = [article("none"), article("some", score=1)]

    assert [i.title for i in select_articles(items)] == ["some", "none"]


def test_sort_by_date_desc_puts_undated_last() -> None:
    items = [discussion("undated-1"), discussion("old", 1), discussion("undated-2"), discussion("new", 5)]

    assert [i.title for i in sort_by_date_desc(items)] == ["new", "old", "undated-1", "undated-2"]


def test_order_discussions_limits() -> None:
    items = [discussion(f"d{n}", n) for n in range(12)]

    ordered = order_discussions(items)

    assert len(ordered) == 10
    assert ordered[0].title == "d11"


def test_group_by_category_follows_registration_order() -> None:
    blog = FakeResource("blog", ContentCategory.NEWS)
    devto = FakeResource("devto-vue", ContentCategory.ARTICLES)
    nuxt = FakeResource("nuxt", ContentCategory.NEWS)
    first = Item(title="First", url="https://a.dev/1", source="Blog")
    second = Item(title="Second", url="https://a.dev/2", source="Nuxt")
    collected = CollectedResult(
        results={"nuxt": [second], "blog": [first], "devto-vue": []},
        resources=[blog, devto, nuxt],
    )

    grouped = group_by_category(collected)

    assert set(grouped) == set(ContentCategory)
    assert grouped[ContentCategory.NEWS] == [first, second]
    assert grouped[ContentCategory.ARTICLES] == []
    assert grouped[ContentCategory.REPOS] == []


def test_rank_sections_keeps_news_and_repo_order() -> None:
    news = [Item(title=f"n{n}", url=f"https://a.dev/{n}", source="Blog") for n in range(3)]
    grouped = {
        ContentCategory.NEWS: news,
        ContentCategory.REPOS: [],
        ContentCategory.DISCUSSIONS: [discussion("old", 1), discussion("new", 2)],
        ContentCategory.ARTICLES: [article("a", score=1), article("b", priority=5)],
    }

    ranked = rank_sections(grouped, article_limit=1)

    assert ranked[ContentCategory.NEWS] == news
    assert [i.title for i in ranked[ContentCategory.DISCUSSIONS]] == ["new", "old"]
    assert [i.title for i in ranked[ContentCategory.ARTICLES]] == ["b"]


@pytest.mark.parametrize("priority", [0, 7, -2])
def test_out_of_range_item_priority_ranks_as_default(priority) -> None:
    items = [
        article("odd", priority=priority, score=5),
        article("normal", priority=3, score=1),
        article("low", priority=2, score=100),
    ]

    selected = select_articles(items)

    assert [i.title for i in selected] == ["odd", "normal", "low"]
