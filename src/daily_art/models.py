"""Data models for the daily artwork record."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class Artwork:
    """One entry of the artwork rotation."""
    title: str
    artist: str
    description: str
    image_url: str


@dataclass
class DailyArt:
    """Artwork of the day as persisted for the display layer."""
    title: str
    artist: str
    description: str
    image_url: str
    date: date
    medium: str
    dimensions: str
    tags: list[str]
    updated_at: datetime
