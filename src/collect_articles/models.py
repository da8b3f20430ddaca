"""Data models for the collect_articles pipeline."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    """Ordered priority tier of an article."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


@dataclass
class RawEntry:
    """Entry parsed from a syndication feed, before normalization."""
    title: str
    description: str
    link: str
    published_at: datetime
    source: Optional[str] = None


@dataclass
class FetchResult:
    """Outcome of fetching one source: entries on success, a reason on failure."""
    source: str
    entries: list[RawEntry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Article:
    """Normalized, classified article as persisted in the snapshot."""
    id: str
    title: str
    summary: str
    content: str
    category: str
    source: str
    date: date
    priority: Priority
    original_link: str
    collected_at: datetime


@dataclass
class CollectionResult:
    """Ranked articles plus the per-source bookkeeping of one collection pass."""
    articles: list[Article]
    fetch_results: list[FetchResult]
    total_fetched: int
    candidate_count: int
    duplicates_removed: int
