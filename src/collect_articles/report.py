"""Run statistics for a collection pass."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone

from collect_articles.models import CollectionResult, Priority

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Summary of one run, counted over the persisted articles."""
    total: int
    categories: dict[str, int]
    sources: dict[str, int]
    priorities: dict[str, int]
    sources_attempted: int
    sources_failed: list[str] = field(default_factory=list)
    total_fetched: int = 0
    candidate_count: int = 0
    duplicates_removed: int = 0
    update_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    duration_seconds: float = 0.0


def build_report(result: CollectionResult, duration_seconds: float = 0.0) -> RunReport:
    articles = result.articles
    categories = Counter(a.category for a in articles)
    sources = Counter(a.source for a in articles)
    priorities = Counter(a.priority.value for a in articles)

    return RunReport(
        total=len(articles),
        categories=dict(categories.most_common()),
        sources=dict(sources.most_common()),
        # Fixed high -> low order, tiers with no articles omitted
        priorities={
            p.value: priorities[p.value]
            for p in sorted(Priority, key=lambda p: p.rank, reverse=True)
            if priorities[p.value]
        },
        sources_attempted=len(result.fetch_results),
        sources_failed=[r.source for r in result.fetch_results if not r.ok],
        total_fetched=result.total_fetched,
        candidate_count=result.candidate_count,
        duplicates_removed=result.duplicates_removed,
        duration_seconds=duration_seconds,
    )


def log_report(report: RunReport) -> None:
    logger.info("Update report: %d articles at %s", report.total, report.update_time.isoformat())
    logger.info(
        "Sources: %d attempted, %d failed; %d entries fetched, %d candidates, %d duplicates removed",
        report.sources_attempted,
        len(report.sources_failed),
        report.total_fetched,
        report.candidate_count,
        report.duplicates_removed,
    )
    for category, count in report.categories.items():
        logger.info("  category %s: %d", category, count)
    for source, count in report.sources.items():
        logger.info("  source %s: %d", source, count)
    for priority, count in report.priorities.items():
        logger.info("  priority %s: %d", priority, count)
    if report.sources_failed:
        logger.warning("Failed sources: %s", ", ".join(report.sources_failed))
    logger.info("Finished in %.2fs", report.duration_seconds)
