"""RSS/Atom feed fetching and parsing."""

from __future__ import annotations

import logging
from datetime import datetime, timezone, timedelta
from typing import Optional

import feedparser
import requests
from dateutil.parser import parse as parse_date

from collect_articles.clean_articles.clean import clean_text
from collect_articles.models import FetchResult, RawEntry

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; ZenNewsBot/1.0)"
DEFAULT_TIMEOUT = 10
UNKNOWN_SOURCE = "Unknown source"

# Timezone abbreviations for date parsing
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
    "CET": timezone(timedelta(hours=1)),
    "CEST": timezone(timedelta(hours=2)),
}


class FeedParseError(ValueError):
    """Raised when a feed document is malformed."""


def fetch_source(
    source: str,
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    fetched_at: datetime | None = None,
) -> FetchResult:
    """Fetch and parse one source. Never raises; failures come back in the result."""
    if fetched_at is None:
        fetched_at = datetime.now(timezone.utc)

    logger.info("Fetching %s (%s)", source, url)
    try:
        payload = _fetch_payload(url, timeout)
        entries = parse_feed(payload, source, fetched_at)
    except Exception as e:
        logger.error("Failed to fetch %s: %s", source, e)
        return FetchResult(source=source, error=str(e) or type(e).__name__)

    logger.info("Fetched %d entries from %s", len(entries), source)
    return FetchResult(source=source, entries=entries)


def _fetch_payload(url: str, timeout: float) -> bytes:
    response = requests.get(
        url,
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )
    response.raise_for_status()
    return response.content


def parse_feed(
    payload: bytes | str,
    source: str | None = None,
    fetched_at: datetime | None = None,
) -> list[RawEntry]:
    """
    Parse a syndication document into entries, in document order.

    Malformed documents raise FeedParseError; nothing is salvaged from them.
    The feed's own title stands in for `source` when no name is given.
    """
    if fetched_at is None:
        fetched_at = datetime.now(timezone.utc)

    feed = feedparser.parse(payload)
    if feed.bozo and not isinstance(feed.get("bozo_exception"), feedparser.CharacterEncodingOverride):
        raise FeedParseError(f"Malformed feed: {feed.get('bozo_exception')}")

    feed_title = (feed.feed.get("title") or "").strip()
    source_name = source or feed_title or UNKNOWN_SOURCE

    entries = []
    for entry in feed.entries:
        raw = _parse_entry(entry, source_name, fetched_at)
        if raw is not None:
            entries.append(raw)
    return entries


def _parse_entry(entry, source: str, fetched_at: datetime) -> RawEntry | None:
    """Parse a single feed entry into a RawEntry. Entries whose title cleans to nothing are dropped."""
    link = (entry.get("link") or "").strip()
    if not link:
        return None

    title = (entry.get("title") or "").strip()
    # feedparser decodes escaped markup, so a title can be all tags or entities
    if not clean_text(title):
        return None

    description = entry.get("description") or entry.get("summary") or ""

    return RawEntry(
        title=title,
        description=description,
        link=link,
        published_at=_parse_published_date(entry) or fetched_at,
        source=source,
    )


def _parse_published_date(entry) -> Optional[datetime]:
    """Extract and parse the published date from a feed entry."""
    published = entry.get("published") or entry.get("updated")
    if not published:
        return None

    try:
        dt = parse_date(published, tzinfos=TZINFOS)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
