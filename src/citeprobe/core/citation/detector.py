"""Citation detection — runs the layer pipeline over a provider response."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from citeprobe.core.citation.competitors import detect_competitors
from citeprobe.core.citation.config import DEFAULT_DETECTOR_CONFIG, DetectorConfig
from citeprobe.core.citation.layers import CITATION_LAYERS, CitationLayer
from citeprobe.core.citation.position import detect_position
from citeprobe.core.citation.sentiment import detect_sentiment
from citeprobe.core.models import CitationAnalysis, Competitor

logger = logging.getLogger(__name__)


def detect_citation(
    response: str,
    brand_name: str,
    brand_domain: str,
    competitors: Iterable[Competitor] = (),
    config: DetectorConfig = DEFAULT_DETECTOR_CONFIG,
    layers: tuple[CitationLayer, ...] = CITATION_LAYERS,
) -> CitationAnalysis:
    """Decide whether ``response`` cites the brand and how.

    Layers are tried in order (URL, exact name, partial name, domain) and the
    first match sets the citation type and confidence. Position and sentiment
    are only computed for a match; competitor co-mentions always are.
    """
    response = response or ""
    brand_name = brand_name or ""
    brand_domain = brand_domain or ""
    mentioned = detect_competitors(response, competitors or ())

    for layer in layers:
        match = layer.matcher(response, brand_name, brand_domain, config)
        if match is None:
            continue

        logger.debug(
            "Brand %r matched by %s layer (confidence %.1f)",
            brand_name, layer.name, layer.confidence,
        )
        sentiment = None
        if match.start is not None:
            sentiment = detect_sentiment(response, match.start, match.length, config)

        return CitationAnalysis(
            cited=True,
            citation_type=match.citation_type,
            sentiment=sentiment,
            position=detect_position(response, brand_name, brand_domain),
            competitors_mentioned=mentioned,
            confidence=layer.confidence,
            matched_layer=layer.name,
        )

    logger.debug("Brand %r not cited", brand_name)
    return CitationAnalysis(competitors_mentioned=mentioned)
