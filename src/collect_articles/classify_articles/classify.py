"""Keyword-based category and priority classification."""

from __future__ import annotations

from typing import Iterable, Mapping

from collect_articles.classify_articles.keywords import (
    CATCH_ALL_CATEGORY,
    CATEGORY_KEYWORDS,
    IMPORTANT_KEYWORDS,
    IMPORTANT_WEIGHT,
    URGENT_KEYWORDS,
    URGENT_WEIGHT,
)
from collect_articles.models import Priority


def _build_input_text(title: str | None, description: str | None) -> str:
    return f"{title or ''} {description or ''}".lower()


def _count_matches(text: str, keywords: Iterable[str]) -> int:
    return sum(1 for keyword in keywords if keyword in text)


def categorize(
    title: str | None,
    description: str | None,
    table: Mapping[str, Iterable[str]] = CATEGORY_KEYWORDS,
) -> str:
    """Return the category whose keywords match most often; ties go to the earlier one."""
    text = _build_input_text(title, description)
    best_category = CATCH_ALL_CATEGORY
    max_score = 0

    for category, keywords in table.items():
        score = _count_matches(text, keywords)
        if score > max_score:
            max_score = score
            best_category = category

    return best_category


def score_priority(title: str | None, description: str | None) -> int:
    """Weighted keyword score: each urgent keyword present adds 3, each important one 1."""
    text = _build_input_text(title, description)
    return (
        URGENT_WEIGHT * _count_matches(text, URGENT_KEYWORDS)
        + IMPORTANT_WEIGHT * _count_matches(text, IMPORTANT_KEYWORDS)
    )


def priority_from_score(score: int) -> Priority:
    if score >= 3:
        return Priority.HIGH
    if score >= 1:
        return Priority.MEDIUM
    return Priority.LOW


def calculate_priority(title: str | None, description: str | None) -> Priority:
    return priority_from_score(score_priority(title, description))
