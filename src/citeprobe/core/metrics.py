"""Statistical aggregation for citation results — citation rates, positions, sentiment."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from citeprobe.core.citation import DEFAULT_DETECTOR_CONFIG, DetectorConfig, detect_citation
from citeprobe.core.models import (
    CitationAnalysis,
    CitationSummary,
    Competitor,
    ProviderCitation,
    ProviderResponse,
    ProviderSummary,
)


def analyze_responses(
    responses: Iterable[ProviderResponse],
    brand_name: str,
    brand_domain: str,
    competitors: Sequence[Competitor] = (),
    config: DetectorConfig = DEFAULT_DETECTOR_CONFIG,
) -> list[ProviderCitation]:
    """Run citation detection over each provider response."""
    return [
        ProviderCitation(
            provider=r.provider,
            model=r.model,
            analysis=detect_citation(
                r.response, brand_name, brand_domain, competitors, config
            ),
        )
        for r in responses
    ]


def _avg_position(analyses: list[CitationAnalysis]) -> float | None:
    positions = [a.position for a in analyses if a.position is not None]
    return sum(positions) / len(positions) if positions else None


def compute_provider_summary(
    results: list[ProviderCitation], provider: str
) -> ProviderSummary:
    """Compute citation metrics for a single provider."""
    analyses = [r.analysis for r in results if r.provider == provider]
    total = len(analyses)
    if total == 0:
        return ProviderSummary(provider=provider)

    cited = sum(1 for a in analyses if a.cited)
    return ProviderSummary(
        provider=provider,
        total_responses=total,
        cited_responses=cited,
        citation_rate=cited / total,
        avg_position=_avg_position(analyses),
    )


def summarize_citations(
    results: list[ProviderCitation],
    competitors: Sequence[Competitor] | None = None,
) -> CitationSummary:
    """Aggregate many citation verdicts into a CitationSummary.

    Average confidence is taken over cited results only. Competitor counts
    follow ``competitors`` order when given, else first-seen order.
    """
    total = len(results)
    if total == 0:
        return CitationSummary(
            competitor_mentions={c.name: 0 for c in competitors or ()}
        )

    analyses = [r.analysis for r in results]
    cited = [a for a in analyses if a.cited]

    summary = CitationSummary(
        total_responses=total,
        cited_responses=len(cited),
        citation_rate=len(cited) / total,
        avg_position=_avg_position(analyses),
        avg_confidence=(
            sum(a.confidence for a in cited) / len(cited) if cited else 0.0
        ),
        competitor_mentions={c.name: 0 for c in competitors or ()},
    )

    for a in cited:
        if a.sentiment is not None:
            summary.sentiment_breakdown[a.sentiment.value] += 1
        if a.citation_type is not None:
            summary.citation_type_breakdown[a.citation_type.value] += 1

    for a in analyses:
        for name in a.competitors_mentioned:
            summary.competitor_mentions[name] = summary.competitor_mentions.get(name, 0) + 1

    providers = list(dict.fromkeys(r.provider for r in results))
    summary.providers = [compute_provider_summary(results, p) for p in providers]
    return summary
