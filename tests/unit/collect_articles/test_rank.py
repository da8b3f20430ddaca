"""Tests for collect_articles.rank_articles.rank module."""

from datetime import date, datetime, timedelta, timezone

from collect_articles.models import Article, Priority
from collect_articles.rank_articles.rank import (
    dedup_key,
    rank_articles,
    remove_duplicates,
)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _article(title: str, source: str = "Onet", priority: Priority = Priority.LOW, offset: int = 0) -> Article:
    return Article(
        id=f"{source}-{title}",
        title=title,
        summary="Summary sentence here.",
        content="Content",
        category="Other",
        source=source,
        date=date(2024, 1, 1),
        priority=priority,
        original_link=f"https://example.com/{title}",
        collected_at=BASE_TIME + timedelta(seconds=offset),
    )


class TestDedupKey:
    def test_lowercases_and_strips_punctuation(self) -> None:
        assert dedup_key("Hello, World!") == "hello world"

    def test_collapses_whitespace(self) -> None:
        assert dedup_key("  Many   spaces\there ") == "many spaces here"

    def test_keeps_non_ascii_letters(self) -> None:
        assert dedup_key("Ważne: Żółw w Łodzi!") == "ważne żółw w łodzi"

    def test_truncates_to_50_characters(self) -> None:
        assert len(dedup_key("a" * 80)) == 50

    def test_prefix_collision(self) -> None:
        prefix = "x" * 50
        assert dedup_key(prefix + " first ending") == dedup_key(prefix + " second ending")


class TestRemoveDuplicates:
    def test_first_seen_wins(self) -> None:
        first = _article("Breaking: Big news!", source="Interia")
        second = _article("breaking big news", source="TVN24")
        other = _article("Something else")

        result = remove_duplicates([first, second, other])

        assert result == [first, other]

    def test_is_idempotent(self) -> None:
        articles = [_article("A story"), _article("a story!"), _article("B story")]
        once = remove_duplicates(articles)
        assert remove_duplicates(once) == once

    def test_empty_input(self) -> None:
        assert remove_duplicates([]) == []


class TestRankArticles:
    def test_orders_by_priority_then_recency(self) -> None:
        low = _article("low", priority=Priority.LOW, offset=10)
        high_old = _article("high old", priority=Priority.HIGH, offset=0)
        high_new = _article("high new", priority=Priority.HIGH, offset=5)
        medium = _article("medium", priority=Priority.MEDIUM, offset=20)

        result = rank_articles([low, high_old, medium, high_new])

        assert result == [high_new, high_old, medium, low]

    def test_equal_keys_keep_input_order(self) -> None:
        a = _article("a")
        b = _article("b")
        assert rank_articles([a, b]) == [a, b]

    def test_truncates_to_limit(self) -> None:
        articles = [
            _article(f"story {i}", priority=list(Priority)[i % 3], offset=i)
            for i in range(30)
        ]
        result = rank_articles(articles)

        assert len(result) == 20
        ranks = [a.priority.rank for a in result]
        assert ranks == sorted(ranks, reverse=True)

    def test_custom_limit(self) -> None:
        articles = [_article(f"story {i}") for i in range(5)]
        assert len(rank_articles(articles, limit=3)) == 3
