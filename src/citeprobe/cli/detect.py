"""Detect and summarize commands — analyze saved provider responses."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from citeprobe.cli._helpers import (
    fail,
    load_cli_config,
    parse_competitors,
    parse_responses,
    read_text,
    resolve_format,
)
from citeprobe.core.citation import detect_citation
from citeprobe.core.config import CiteprobeConfig
from citeprobe.core.errors import InputError
from citeprobe.core.metrics import analyze_responses, summarize_citations
from citeprobe.core.models import (
    CitationAnalysis,
    CitationSummary,
    Competitor,
    OutputFormat,
)
from citeprobe.formatters.csv import format_analysis_csv, format_summary_csv

console = Console()


def _resolve_brand(
    brand: str | None,
    domain: str | None,
    competitor: list[str] | None,
    cfg: CiteprobeConfig,
) -> tuple[str, str, list[Competitor]]:
    """CLI values win over config values; a brand name or domain is required."""
    effective_brand = brand or cfg.brand or ""
    effective_domain = domain or cfg.domain or ""
    if not effective_brand and not effective_domain:
        raise InputError("A brand name or domain is required (--brand/--domain or config)")
    competitors = parse_competitors(competitor) if competitor else list(cfg.competitors)
    return effective_brand, effective_domain, competitors


def _fmt(value: object) -> str:
    if value is None:
        return "-"
    return str(getattr(value, "value", value))


def _render_analysis(analysis: CitationAnalysis, brand: str) -> None:
    verdict = "[bold green]CITED[/bold green]" if analysis.cited else "[bold red]NOT CITED[/bold red]"
    console.print(f"\n{verdict} {escape(brand)}")

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Citation type", _fmt(analysis.citation_type))
    table.add_row("Confidence", f"{analysis.confidence:.1f}")
    table.add_row("Matched layer", _fmt(analysis.matched_layer))
    table.add_row("Sentiment", _fmt(analysis.sentiment))
    table.add_row("Position", _fmt(analysis.position))
    table.add_row(
        "Competitors", escape(", ".join(analysis.competitors_mentioned)) or "-"
    )
    console.print(table)


def _render_summary(summary: CitationSummary) -> None:
    console.print(
        f"\n[bold]Cited in {summary.cited_responses}/{summary.total_responses} "
        f"responses[/bold] ({summary.citation_rate:.0%})"
    )
    if summary.avg_position is not None:
        console.print(f"  [bold]Average position:[/bold] {summary.avg_position:.1f}")
    console.print(f"  [bold]Average confidence:[/bold] {summary.avg_confidence:.2f}")

    table = Table(title="By provider")
    table.add_column("Provider", style="bold")
    table.add_column("Responses", justify="right")
    table.add_column("Cited", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("Avg position", justify="right")
    for p in summary.providers:
        table.add_row(
            escape(p.provider),
            str(p.total_responses),
            str(p.cited_responses),
            f"{p.citation_rate:.0%}",
            "-" if p.avg_position is None else f"{p.avg_position:.1f}",
        )
    console.print(table)

    sentiments = ", ".join(f"{k}: {v}" for k, v in summary.sentiment_breakdown.items())
    console.print(f"  [bold]Sentiment:[/bold] {sentiments}")
    types = ", ".join(f"{k}: {v}" for k, v in summary.citation_type_breakdown.items())
    console.print(f"  [bold]Citation types:[/bold] {types}")
    if summary.competitor_mentions:
        mentions = ", ".join(
            f"{escape(k)}: {v}" for k, v in summary.competitor_mentions.items()
        )
        console.print(f"  [bold]Competitor mentions:[/bold] {mentions}")


def register(app: typer.Typer) -> None:
    """Register the detect and summarize commands onto the Typer app."""

    @app.command()
    def detect(
        ctx: typer.Context,
        source: str = typer.Argument(
            "-", help="File holding the provider response ('-' reads stdin)"
        ),
        brand: str = typer.Option(None, "--brand", "-b", help="Brand name"),
        domain: str = typer.Option(None, "--domain", "-d", help="Brand domain, e.g. acme.com"),
        competitor: list[str] = typer.Option(
            None, "--competitor", "-c", help="Competitor as NAME or NAME=DOMAIN (repeatable)"
        ),
        format: OutputFormat = typer.Option(
            None, "--format", "-f", help="Output format: table, json, or csv"
        ),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """Detect whether a saved provider response cites the brand."""
        cfg = load_cli_config(ctx, console)
        try:
            name, brand_domain, competitors = _resolve_brand(brand, domain, competitor, cfg)
            response = read_text(source)
        except InputError as exc:
            fail(console, exc)

        analysis = detect_citation(response, name, brand_domain, competitors, cfg.detector)
        output = resolve_format(format, json_output, cfg)

        if output == OutputFormat.json:
            console.print_json(analysis.model_dump_json())
            return
        if output == OutputFormat.csv:
            print(format_analysis_csv(analysis), end="")
            return
        _render_analysis(analysis, name or brand_domain)

    @app.command()
    def summarize(
        ctx: typer.Context,
        source: str = typer.Argument(
            help="JSON file with a list of {provider, model, response} objects"
        ),
        brand: str = typer.Option(None, "--brand", "-b", help="Brand name"),
        domain: str = typer.Option(None, "--domain", "-d", help="Brand domain, e.g. acme.com"),
        competitor: list[str] = typer.Option(
            None, "--competitor", "-c", help="Competitor as NAME or NAME=DOMAIN (repeatable)"
        ),
        format: OutputFormat = typer.Option(
            None, "--format", "-f", help="Output format: table, json, or csv"
        ),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """Analyze a batch of provider responses and summarize citation metrics."""
        cfg = load_cli_config(ctx, console)
        try:
            name, brand_domain, competitors = _resolve_brand(brand, domain, competitor, cfg)
            responses = parse_responses(read_text(source))
        except InputError as exc:
            fail(console, exc)

        results = analyze_responses(responses, name, brand_domain, competitors, cfg.detector)
        summary = summarize_citations(results, competitors)
        output = resolve_format(format, json_output, cfg)

        if output == OutputFormat.json:
            console.print_json(json.dumps({
                "summary": summary.model_dump(mode="json"),
                "results": [r.model_dump(mode="json") for r in results],
            }))
            return
        if output == OutputFormat.csv:
            print(format_summary_csv(summary, results), end="")
            return
        _render_summary(summary)
