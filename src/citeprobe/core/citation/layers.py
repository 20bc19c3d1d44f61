"""Detection layers, evaluated in priority order by the detector.

Each matcher takes ``(response, brand_name, brand_domain, config)`` and returns
a ``LayerMatch`` or None. A layer owns a fixed confidence; the first layer
that matches decides the verdict.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from citeprobe.core.citation.config import DetectorConfig
from citeprobe.core.citation.sentiment import extract_window
from citeprobe.core.models import CitationType

URL_PATTERN = re.compile(r"https?://[^\s)<>]+", re.IGNORECASE)


@dataclass(frozen=True)
class LayerMatch:
    """Where a layer matched and how it classifies the mention.

    ``start`` is the anchor for sentiment scoring; None skips sentiment.
    """

    citation_type: CitationType
    start: int | None
    length: int


Matcher = Callable[[str, str, str, DetectorConfig], LayerMatch | None]


@dataclass(frozen=True)
class CitationLayer:
    name: str
    confidence: float
    matcher: Matcher


def classify_context(
    response: str, start: int, length: int, config: DetectorConfig
) -> CitationType:
    """Classify a name mention from keywords in the surrounding text.

    Comparison keywords take priority over recommendation keywords.
    """
    surrounding = extract_window(response, start, length, config.classification_window)
    if any(k in surrounding for k in config.comparison_keywords):
        return CitationType.comparison
    if any(k in surrounding for k in config.recommendation_keywords):
        return CitationType.recommendation
    return CitationType.direct_mention


def match_url(
    response: str, brand_name: str, brand_domain: str, config: DetectorConfig
) -> LayerMatch | None:
    """Layer 1: a http(s) URL containing the brand domain."""
    if not brand_domain:
        return None
    domain = brand_domain.lower()
    if not any(domain in url.lower() for url in URL_PATTERN.findall(response)):
        return None
    index = response.lower().find(domain)
    return LayerMatch(
        citation_type=CitationType.url_link,
        start=index if index != -1 else None,
        length=len(brand_domain),
    )


def match_exact_name(
    response: str, brand_name: str, brand_domain: str, config: DetectorConfig
) -> LayerMatch | None:
    """Layer 2: the brand name as a whole word, case-insensitive."""
    if not brand_name:
        return None
    match = re.search(rf"\b{re.escape(brand_name)}\b", response, re.IGNORECASE)
    if match is None:
        return None
    return LayerMatch(
        citation_type=classify_context(response, match.start(), len(brand_name), config),
        start=match.start(),
        length=len(brand_name),
    )


def match_partial_name(
    response: str, brand_name: str, brand_domain: str, config: DetectorConfig
) -> LayerMatch | None:
    """Layer 3: the brand name anywhere, including inside a longer token."""
    if not brand_name:
        return None
    index = response.lower().find(brand_name.lower())
    if index == -1:
        return None
    return LayerMatch(CitationType.direct_mention, index, len(brand_name))


def match_domain(
    response: str, brand_name: str, brand_domain: str, config: DetectorConfig
) -> LayerMatch | None:
    """Layer 4: the bare domain outside of any URL."""
    if not brand_domain:
        return None
    index = response.lower().find(brand_domain.lower())
    if index == -1:
        return None
    return LayerMatch(CitationType.direct_mention, index, len(brand_domain))


URL_CONFIDENCE: float = 1.0
EXACT_NAME_CONFIDENCE: float = 0.9
PARTIAL_NAME_CONFIDENCE: float = 0.7
DOMAIN_CONFIDENCE: float = 0.5

CITATION_LAYERS: tuple[CitationLayer, ...] = (
    CitationLayer("url", URL_CONFIDENCE, match_url),
    CitationLayer("exact-name", EXACT_NAME_CONFIDENCE, match_exact_name),
    CitationLayer("partial-name", PARTIAL_NAME_CONFIDENCE, match_partial_name),
    CitationLayer("domain", DOMAIN_CONFIDENCE, match_domain),
)
"""Evaluated top-down, first match wins."""
