"""Tests for CSV output."""

from __future__ import annotations

import csv
import io

from citeprobe.core.metrics import summarize_citations
from citeprobe.core.models import (
    CitationAnalysis,
    CitationType,
    Competitor,
    ProviderCitation,
    Sentiment,
)
from citeprobe.core.prompts import generate_validation_probes
from citeprobe.formatters.csv import (
    format_analysis_csv,
    format_probes_csv,
    format_summary_csv,
)


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


def test_probes_csv():
    probes = generate_validation_probes("Acme", "CRM, sales", [Competitor(name="Beta")])
    rows = _rows(format_probes_csv(probes))

    assert rows[0] == ["category", "prompt"]
    assert len(rows) == len(probes) + 1
    assert rows[1][0] == "best-of"
    assert rows[1][1] == probes[0].prompt


def test_analysis_csv():
    analysis = CitationAnalysis(
        cited=True,
        citation_type=CitationType.url_link,
        sentiment=Sentiment.positive,
        competitors_mentioned=("Beta", "Gamma"),
        confidence=1.0,
    )
    rows = _rows(format_analysis_csv(analysis))

    assert rows[0] == [
        "cited", "citation_type", "sentiment", "position", "confidence", "competitors",
    ]
    assert rows[1] == ["True", "url-link", "positive", "", "1.0", "Beta;Gamma"]


def test_not_cited_analysis_csv():
    rows = _rows(format_analysis_csv(CitationAnalysis()))
    assert rows[1] == ["False", "", "", "", "0.0", ""]


def test_summary_csv():
    results = [
        ProviderCitation(
            provider="openai",
            model="gpt-4o",
            analysis=CitationAnalysis(cited=True, position=2, confidence=0.9),
        ),
        ProviderCitation(provider="gemini", analysis=CitationAnalysis()),
    ]
    rows = _rows(format_summary_csv(summarize_citations(results), results))

    assert rows[0][:2] == ["provider", "model"]
    assert rows[1][:3] == ["openai", "gpt-4o", "True"]
    assert rows[2][:3] == ["gemini", "", "False"]
    assert rows[3] == []
    assert rows[4][0] == "SUMMARY"
    assert rows[5] == ["all", "2", "1", "0.5", "2.0", "0.9"]
    assert rows[6] == []
    assert rows[7] == [
        "BREAKDOWN", "positive", "neutral", "negative",
        "direct-mention", "url-link", "recommendation", "comparison",
    ]
    assert rows[8] == ["count", "0", "0", "0", "0", "0", "0", "0"]


def test_summary_csv_counts_citation_types():
    results = [
        ProviderCitation(
            provider="openai",
            analysis=CitationAnalysis(
                cited=True, citation_type="url-link", sentiment="positive", confidence=1.0
            ),
        ),
    ]
    rows = _rows(format_summary_csv(summarize_citations(results), results))
    assert rows[8] == ["count", "1", "0", "0", "0", "1", "0", "0"]
