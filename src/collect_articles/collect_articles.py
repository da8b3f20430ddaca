"""Collect, classify, deduplicate and rank articles from RSS sources."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from collect_articles.classify_articles.classify import calculate_priority, categorize
from collect_articles.clean_articles.clean import clean_text, generate_summary
from collect_articles.fetch_articles.fetch_feed import DEFAULT_TIMEOUT, fetch_source
from collect_articles.models import Article, CollectionResult, RawEntry
from collect_articles.rank_articles.rank import MAX_ARTICLES, rank_articles, remove_duplicates
from collect_articles.report import RunReport, build_report, log_report
from common.hashing import generate_article_id
from common.local_io import write_json_snapshot
from common.serialization import serialize_dataclass
from daily_art.daily_art import update_daily_art

logger = logging.getLogger(__name__)

MAX_PER_SOURCE = 8
SOURCE_DELAY_SECONDS = 1.0
ARTICLES_FILENAME = "articles.json"
DAILY_ART_FILENAME = "daily-art.json"


def build_article(entry: RawEntry, source: str, position: int | None = None) -> Article:
    """Normalize and classify one feed entry; `position` is its index in the feed."""
    title = clean_text(entry.title)
    content = clean_text(entry.description)

    return Article(
        id=generate_article_id(source, entry.link, position),
        title=title,
        summary=generate_summary(entry.description),
        content=content,
        category=categorize(title, content),
        source=source,
        date=entry.published_at.astimezone(timezone.utc).date(),
        priority=calculate_priority(title, content),
        original_link=entry.link,
        collected_at=datetime.now(timezone.utc),
    )


def collect_articles(
    sources: Mapping[str, str],
    max_per_source: int = MAX_PER_SOURCE,
    max_articles: int = MAX_ARTICLES,
    delay_seconds: float = SOURCE_DELAY_SECONDS,
    timeout: float = DEFAULT_TIMEOUT,
) -> CollectionResult:
    """
    Fetch every source in turn and return the ranked, deduplicated article set.

    Sources are processed one after another with `delay_seconds` between them.
    A failing source contributes no articles and does not stop the others.
    Each source contributes at most its first `max_per_source` entries.
    """
    logger.info("Collecting articles from %d sources", len(sources))

    candidates: list[Article] = []
    fetch_results = []
    total_fetched = 0

    for i, (source, url) in enumerate(sources.items()):
        if i > 0 and delay_seconds > 0:
            time.sleep(delay_seconds)

        result = fetch_source(source, url, timeout=timeout)
        fetch_results.append(result)
        total_fetched += len(result.entries)

        for position, entry in enumerate(result.entries[:max_per_source]):
            candidates.append(build_article(entry, source, position))

    logger.info("Collected %d entries in total from all sources", total_fetched)

    unique = remove_duplicates(candidates)
    ranked = rank_articles(unique, limit=max_articles)
    logger.info(
        "%d unique articles after filtering, keeping %d",
        len(unique),
        len(ranked),
    )

    return CollectionResult(
        articles=ranked,
        fetch_results=fetch_results,
        total_fetched=total_fetched,
        candidate_count=len(candidates),
        duplicates_removed=len(candidates) - len(unique),
    )


def save_articles(articles: list[Article], output_dir: str | Path) -> Path:
    records = [serialize_dataclass(article, camel_case=True) for article in articles]
    path = write_json_snapshot(records, Path(output_dir) / ARTICLES_FILENAME)
    logger.info("Saved %d articles to %s", len(articles), path)
    return path


def run_pipeline(
    sources: Mapping[str, str],
    output_dir: str | Path,
    max_per_source: int = MAX_PER_SOURCE,
    max_articles: int = MAX_ARTICLES,
    delay_seconds: float = SOURCE_DELAY_SECONDS,
    timeout: float = DEFAULT_TIMEOUT,
) -> RunReport:
    """Run one full collection: articles snapshot, daily artwork, report.

    Write failures propagate; the caller decides how to abort.
    """
    started = time.monotonic()

    result = collect_articles(
        sources,
        max_per_source=max_per_source,
        max_articles=max_articles,
        delay_seconds=delay_seconds,
        timeout=timeout,
    )
    save_articles(result.articles, output_dir)
    update_daily_art(Path(output_dir) / DAILY_ART_FILENAME)

    report = build_report(result, duration_seconds=time.monotonic() - started)
    log_report(report)
    return report
