"""Pydantic models for probes, citation verdicts and batch summaries."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# ── Probe categories ─────────────────────────────────────────────────────────


class ProbeCategory(str, Enum):
    """Question patterns a probe can be built from."""

    # Standard probes
    best_of = "best-of"
    top_list = "top-list"
    comparison = "comparison"
    how_to = "how-to"
    recommendation = "recommendation"
    alternative = "alternative"

    # Validation probes
    difference = "difference"
    when_to_use = "when-to-use"
    problem_solving = "problem-solving"
    for_audience = "for-audience"
    beginner = "beginner"
    budget = "budget"
    enterprise = "enterprise"
    pros_cons = "pros-cons"
    what_is = "what-is"
    use_case = "use-case"


class CategoryType(str, Enum):
    standard = "standard"
    validation = "validation"


class ProbeCategoryInfo(BaseModel):
    """Listing entry describing one probe category."""

    category: ProbeCategory
    label: str
    description: str = ""
    type: CategoryType


class GeneratedProbe(BaseModel):
    """A prompt produced for one category of a validation batch."""

    category: ProbeCategory
    prompt: str
    variables: dict[str, str] = Field(default_factory=dict)


# ── Citation detection ───────────────────────────────────────────────────────


class CitationType(str, Enum):
    direct_mention = "direct-mention"
    url_link = "url-link"
    recommendation = "recommendation"
    comparison = "comparison"


class Sentiment(str, Enum):
    positive = "positive"
    neutral = "neutral"
    negative = "negative"


class Competitor(BaseModel):
    """A competing brand, identified by display name and optional domain."""

    model_config = ConfigDict(frozen=True)

    name: str
    domain: str = ""


class CitationAnalysis(BaseModel):
    """Verdict for a single provider response."""

    model_config = ConfigDict(frozen=True)

    cited: bool = False
    citation_type: CitationType | None = None
    sentiment: Sentiment | None = None
    position: int | None = None
    competitors_mentioned: tuple[str, ...] = ()
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    matched_layer: str | None = Field(
        default=None, description="Name of the detection layer that matched"
    )


# ── Batch summaries ──────────────────────────────────────────────────────────


class ProviderResponse(BaseModel):
    """Raw answer text captured from one AI provider."""

    provider: str
    model: str = ""
    response: str = ""


class ProviderCitation(BaseModel):
    """Citation verdict attached to the provider that produced the response."""

    provider: str
    model: str = ""
    analysis: CitationAnalysis


class ProviderSummary(BaseModel):
    provider: str
    total_responses: int = 0
    cited_responses: int = 0
    citation_rate: float = 0.0
    avg_position: float | None = None


class CitationSummary(BaseModel):
    """Aggregated citation metrics over many provider responses."""

    total_responses: int = 0
    cited_responses: int = 0
    citation_rate: float = 0.0
    avg_position: float | None = None
    avg_confidence: float = 0.0
    sentiment_breakdown: dict[str, int] = Field(
        default_factory=lambda: {s.value: 0 for s in Sentiment}
    )
    citation_type_breakdown: dict[str, int] = Field(
        default_factory=lambda: {t.value: 0 for t in CitationType}
    )
    competitor_mentions: dict[str, int] = Field(default_factory=dict)
    providers: list[ProviderSummary] = Field(default_factory=list)


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    csv = "csv"
