"""Citation detection — layered brand mention analysis for provider responses."""

from citeprobe.core.citation.competitors import detect_competitors
from citeprobe.core.citation.config import DEFAULT_DETECTOR_CONFIG, DetectorConfig
from citeprobe.core.citation.detector import detect_citation
from citeprobe.core.citation.layers import CITATION_LAYERS, CitationLayer, LayerMatch
from citeprobe.core.citation.position import detect_position
from citeprobe.core.citation.sentiment import detect_sentiment

__all__ = [
    "CITATION_LAYERS",
    "DEFAULT_DETECTOR_CONFIG",
    "CitationLayer",
    "DetectorConfig",
    "LayerMatch",
    "detect_citation",
    "detect_competitors",
    "detect_position",
    "detect_sentiment",
]
