"""Text cleaning and summary generation."""

import re
from typing import Optional

NO_DESCRIPTION = "No article description available."
MIN_SENTENCE_LENGTH = 10

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&(?:#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_SENTENCE_END_RE = re.compile(r"[.!?]+")


def clean_text(text: Optional[str]) -> str:
    """Strip HTML tags and entities and collapse whitespace. None/empty -> ''."""
    if not text:
        return ""
    # Delete tags outright (Wa<b>żne</b> -> Ważne), then blank out stray brackets
    text = _TAG_RE.sub("", text)
    text = text.replace("<", " ").replace(">", " ")
    text = _ENTITY_RE.sub(" ", text)
    # Collapse whitespace, newlines included
    return re.sub(r"\s+", " ", text).strip()


def generate_summary(description: Optional[str], max_sentences: int = 2) -> str:
    """
    Build a short summary from the first sentences of a description.

    Fragments shorter than MIN_SENTENCE_LENGTH characters are treated as noise.
    The result always ends with a single period. Without usable text the
    NO_DESCRIPTION placeholder is returned.
    """
    cleaned = clean_text(description)
    if not cleaned:
        return NO_DESCRIPTION

    sentences = [s.strip() for s in _SENTENCE_END_RE.split(cleaned)]
    sentences = [s for s in sentences if len(s) >= MIN_SENTENCE_LENGTH]
    if not sentences:
        return NO_DESCRIPTION

    summary = ". ".join(sentences[:max_sentences])
    return summary if summary.endswith(".") else summary + "."
