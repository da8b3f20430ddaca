"""Helper functions for collect_articles CLI."""

from __future__ import annotations

import argparse
import logging
import os

from collect_articles.collect_articles import MAX_PER_SOURCE, SOURCE_DELAY_SECONDS
from collect_articles.fetch_articles.fetch_feed import DEFAULT_TIMEOUT
from collect_articles.rank_articles.rank import MAX_ARTICLES
from collect_articles.sources import RSS_FEEDS

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "data"


def parse_sources(value: str | None) -> dict[str, str]:
    '''Parse the --sources argument into a name -> feed URL mapping.'''

    # If no value is provided or if "all" is specified, return all sources
    if not value or value.strip().lower() == "all":
        return dict(RSS_FEEDS)

    parsed = [s.strip() for s in value.split(",") if s.strip() and s.strip().lower() != "all"]

    for source in parsed:
        if source not in RSS_FEEDS:
            logger.warning("Invalid source: %s", source)

    sources = {s: RSS_FEEDS[s] for s in parsed if s in RSS_FEEDS}

    if not sources:
        raise ValueError(f"No valid sources provided. Valid sources: {', '.join(sorted(RSS_FEEDS))}")

    return sources


def parse_collect_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for collect_articles.'''

    parser = argparse.ArgumentParser(description="Collect news articles into a JSON snapshot")
    parser.add_argument(
        "--sources",
        default=None,
        help="Comma-separated list of sources (default: all).",
    )
    parser.add_argument(
        "--output-dir",
        default=os.environ.get("ZEN_NEWS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        help="Directory for articles.json and daily-art.json (env: ZEN_NEWS_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--max-per-source",
        type=int,
        default=MAX_PER_SOURCE,
        help=f"Entries taken from each source (default: {MAX_PER_SOURCE})",
    )
    parser.add_argument(
        "--max-articles",
        type=int,
        default=MAX_ARTICLES,
        help=f"Articles kept in the snapshot (default: {MAX_ARTICLES})",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=SOURCE_DELAY_SECONDS,
        help=f"Pause between sources in seconds (default: {SOURCE_DELAY_SECONDS})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout per feed in seconds (default: {DEFAULT_TIMEOUT})",
    )
    return parser.parse_args(argv)
