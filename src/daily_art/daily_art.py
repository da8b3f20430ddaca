"""Select and persist the artwork of the day."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from common.local_io import write_json_snapshot
from common.serialization import serialize_dataclass
from daily_art.artworks import ARTWORKS, DIMENSIONS, MEDIUM, TAGS
from daily_art.models import Artwork, DailyArt

logger = logging.getLogger(__name__)


def select_artwork(now: datetime, artworks: list[Artwork] = ARTWORKS) -> Artwork:
    """Pick an artwork by day of year (1 for January 1st) modulo the rotation size."""
    return artworks[now.timetuple().tm_yday % len(artworks)]


def build_daily_art(now: datetime | None = None) -> DailyArt:
    if now is None:
        now = datetime.now(timezone.utc)
    artwork = select_artwork(now)

    return DailyArt(
        title=artwork.title,
        artist=artwork.artist,
        description=artwork.description,
        image_url=artwork.image_url,
        date=now.date(),
        medium=MEDIUM,
        dimensions=DIMENSIONS,
        tags=list(TAGS),
        updated_at=now,
    )


def update_daily_art(path: str | Path, now: datetime | None = None) -> DailyArt:
    """Replace the daily artwork document at `path` with today's selection."""
    daily_art = build_daily_art(now)
    write_json_snapshot(serialize_dataclass(daily_art, camel_case=True), path)
    logger.info("Updated artwork of the day: %s", daily_art.title)
    return daily_art
