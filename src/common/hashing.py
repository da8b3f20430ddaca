"""Hashing utilities."""

from __future__ import annotations

import hashlib


def generate_article_id(source: str, link: str, position: int | None = None) -> str:
    """Generate a stable 16-char article ID from source name, link and feed position."""
    key = f"{source}:{link}" if position is None else f"{source}:{link}:{position}"
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:16]
