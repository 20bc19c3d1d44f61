"""Configuration model for the citation detection pipeline."""

from pydantic import BaseModel, ConfigDict, Field

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "best",
    "recommend",
    "top",
    "excellent",
    "outstanding",
    "leading",
    "superior",
    "great",
    "fantastic",
    "highly rated",
    "first choice",
    "preferred",
    "trusted",
    "reliable",
    "impressive",
)

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "avoid",
    "issues",
    "problems",
    "worst",
    "poor",
    "lacking",
    "inferior",
    "disappointing",
    "unreliable",
    "overpriced",
    "outdated",
    "difficult",
    "frustrating",
    "limited",
    "mediocre",
)

COMPARISON_KEYWORDS: tuple[str, ...] = ("compare", "vs", "versus", "compared to")
RECOMMENDATION_KEYWORDS: tuple[str, ...] = ("recommend", "suggest", "try")

SENTIMENT_WINDOW: int = 120
CLASSIFICATION_WINDOW: int = 200


class DetectorConfig(BaseModel):
    """Tunables for the citation detector.

    Keyword lists are matched as plain substrings of the lowercased context
    window, so "best" also counts inside "bestseller".
    """

    model_config = ConfigDict(frozen=True)

    sentiment_window: int = Field(
        default=SENTIMENT_WINDOW, ge=0,
        description="Characters on each side of a match used for sentiment",
    )
    classification_window: int = Field(
        default=CLASSIFICATION_WINDOW, ge=0,
        description="Characters on each side of a name match used for citation type",
    )
    positive_keywords: tuple[str, ...] = Field(
        default=POSITIVE_KEYWORDS, description="Keywords scoring positive sentiment"
    )
    negative_keywords: tuple[str, ...] = Field(
        default=NEGATIVE_KEYWORDS, description="Keywords scoring negative sentiment"
    )
    comparison_keywords: tuple[str, ...] = Field(
        default=COMPARISON_KEYWORDS, description="Keywords marking a comparison"
    )
    recommendation_keywords: tuple[str, ...] = Field(
        default=RECOMMENDATION_KEYWORDS, description="Keywords marking a recommendation"
    )


DEFAULT_DETECTOR_CONFIG = DetectorConfig()
