"""Deduplication and ranking of collected articles."""

import logging
import re

from collect_articles.models import Article

logger = logging.getLogger(__name__)

DEDUP_KEY_LENGTH = 50
MAX_ARTICLES = 20

_NON_ALNUM_RE = re.compile(r"[^\w\s]|_")


def dedup_key(title: str) -> str:
    """Normalize a title for near-duplicate detection."""
    key = _NON_ALNUM_RE.sub("", title.lower())
    key = re.sub(r"\s+", " ", key).strip()
    return key[:DEDUP_KEY_LENGTH]


def remove_duplicates(articles: list[Article]) -> list[Article]:
    """Keep the first article for each dedup key, in input order."""
    unique = []
    seen_keys = set()

    for article in articles:
        key = dedup_key(article.title)
        if key in seen_keys:
            logger.debug("Dropping duplicate from %s: %s", article.source, article.title)
            continue
        seen_keys.add(key)
        unique.append(article)

    return unique


def rank_articles(articles: list[Article], limit: int = MAX_ARTICLES) -> list[Article]:
    """Order by priority tier, then most recently collected, and keep the top `limit`."""
    ranked = sorted(
        articles,
        key=lambda a: (a.priority.rank, a.collected_at),
        reverse=True,
    )
    return ranked[:limit]
