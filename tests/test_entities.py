"""Tests for core entities."""

from datetime import datetime, timezone

import pytest

from vue_weekly.core import CollectedResult, Item, ResourceConfig, ResourceKind, UsageMetrics


def test_item_creation() -> None:
    """Test creating a valid item."""
    item = Item(
        title="Vue 3.5 released",
        url="https://blog.vuejs.org/posts/vue-3-5",
        source="Vue.js Blog",
        date=datetime(2025, 9, 1, tzinfo=timezone.utc),
    )

    assert item.title == "Vue 3.5 released"
    assert item.priority == 3
    assert item.score is None


def test_item_validation() -> None:
    """Test item validation."""
    with pytest.raises(ValueError, match="Title cannot be empty"):
        Item(title="", url="https://example.com", source="RSS")

    with pytest.raises(ValueError, match="URL cannot be empty"):
        Item(title="Test", url="", source="RSS")

    with pytest.raises(ValueError, match="URL must be absolute"):
        Item(title="Test", url="/posts/relative", source="RSS")


def test_resource_config_from_dict() -> None:
    config = ResourceConfig.from_dict({
        "id": "hn-vue",
        "kind": "json",
        "url": "https://hn.algolia.com/api/v1/search?query=vue",
        "minScore": 50,
        "limit": 5,
    })

    assert config.kind == ResourceKind.JSON
    assert config.min_score == 50
    assert config.limit == 5
    assert config.priority == 3
    assert config.tag is None


def test_resource_config_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        ResourceConfig(id="x", kind="soap")


def test_resource_config_requires_id() -> None:
    with pytest.raises(ValueError, match="Resource id cannot be empty"):
        ResourceConfig.from_dict({"kind": "rss", "url": "https://example.com/feed"})


def test_usage_to_dict_omits_missing_cache_fields() -> None:
    assert UsageMetrics(input_tokens=10, output_tokens=5).to_dict() == {
        "input_tokens": 10,
        "output_tokens": 5,
    }
    assert UsageMetrics(1, 2, 3, 4).to_dict()["cache_read_input_tokens"] == 4


def test_collected_result_errors() -> None:
    collected = CollectedResult(errors={"reddit": RuntimeError("boom")})

    assert collected.has_errors
    assert collected.failed_ids == ["reddit"]
    assert not CollectedResult().has_errors
