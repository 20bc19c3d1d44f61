"""CSV formatter for probes, citation verdicts and summaries."""

from __future__ import annotations

import csv
import io

from citeprobe.core.models import (
    CitationAnalysis,
    CitationSummary,
    GeneratedProbe,
    ProviderCitation,
)


def _value(v: object) -> object:
    """Render enums by value and None as an empty cell."""
    if v is None:
        return ""
    return getattr(v, "value", v)


def format_probes_csv(probes: list[GeneratedProbe]) -> str:
    """Format a generated probe set as CSV, one probe per row."""
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(["category", "prompt"])
    for probe in probes:
        writer.writerow([probe.category.value, probe.prompt])

    return output.getvalue()


def _analysis_cells(analysis: CitationAnalysis) -> list[object]:
    return [
        analysis.cited,
        _value(analysis.citation_type),
        _value(analysis.sentiment),
        _value(analysis.position),
        analysis.confidence,
        ";".join(analysis.competitors_mentioned),
    ]


_ANALYSIS_HEADER = [
    "cited", "citation_type", "sentiment", "position", "confidence", "competitors",
]


def format_analysis_csv(analysis: CitationAnalysis) -> str:
    """Format a single citation verdict as CSV."""
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(_ANALYSIS_HEADER)
    writer.writerow(_analysis_cells(analysis))

    return output.getvalue()


def format_summary_csv(summary: CitationSummary, results: list[ProviderCitation]) -> str:
    """Format per-response rows followed by a summary block."""
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(["provider", "model", *_ANALYSIS_HEADER])
    for r in results:
        writer.writerow([r.provider, r.model, *_analysis_cells(r.analysis)])

    # Summary row
    writer.writerow([])
    writer.writerow(["SUMMARY", "total_responses", "cited_responses", "citation_rate",
                     "avg_position", "avg_confidence"])
    writer.writerow([
        "all",
        summary.total_responses,
        summary.cited_responses,
        round(summary.citation_rate, 3),
        "" if summary.avg_position is None else round(summary.avg_position, 2),
        round(summary.avg_confidence, 3),
    ])

    # Sentiment and citation type breakdown
    breakdown = {**summary.sentiment_breakdown, **summary.citation_type_breakdown}
    writer.writerow([])
    writer.writerow(["BREAKDOWN", *breakdown])
    writer.writerow(["count", *breakdown.values()])

    return output.getvalue()
