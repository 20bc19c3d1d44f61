"""Keyword sentiment scoring around a brand mention."""

from __future__ import annotations

from citeprobe.core.citation.config import DEFAULT_DETECTOR_CONFIG, DetectorConfig
from citeprobe.core.models import Sentiment


def extract_window(text: str, start: int, length: int, window: int) -> str:
    """Return the lowercased text within ``window`` characters of a match."""
    lo = max(0, start - window)
    hi = min(len(text), start + length + window)
    return text[lo:hi].lower()


def count_keywords(text: str, keywords: tuple[str, ...]) -> int:
    """Count how many keywords occur in ``text`` (each keyword scores once)."""
    return sum(1 for keyword in keywords if keyword in text)


def detect_sentiment(
    text: str,
    start: int,
    length: int,
    config: DetectorConfig = DEFAULT_DETECTOR_CONFIG,
) -> Sentiment:
    """Score the context around a match as positive, negative or neutral.

    Ties, including a window with no keywords at all, are neutral.
    """
    surrounding = extract_window(text, start, length, config.sentiment_window)
    positive = count_keywords(surrounding, config.positive_keywords)
    negative = count_keywords(surrounding, config.negative_keywords)

    if positive > negative:
        return Sentiment.positive
    if negative > positive:
        return Sentiment.negative
    return Sentiment.neutral
