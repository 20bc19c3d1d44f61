"""Probes command — generate the validation probe set for a brand."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from citeprobe.cli._helpers import fail, load_cli_config, resolve_format
from citeprobe.core.errors import InputError
from citeprobe.core.models import OutputFormat
from citeprobe.core.prompts import generate_validation_probes
from citeprobe.formatters.csv import format_probes_csv

console = Console()


def register(app: typer.Typer) -> None:
    """Register the probes command onto the Typer app."""

    @app.command()
    def probes(
        ctx: typer.Context,
        category: str = typer.Argument(
            None, help="Product category to probe, e.g. 'CRM software'"
        ),
        brand: str = typer.Option(None, "--brand", "-b", help="Brand name"),
        competitor: list[str] = typer.Option(
            None, "--competitor", "-c", help="Competitor name (repeatable, first 3 used)"
        ),
        format: OutputFormat = typer.Option(
            None, "--format", "-f", help="Output format: table, json, or csv"
        ),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """Generate validation probes for a brand in a product category."""
        cfg = load_cli_config(ctx, console)
        effective_brand = brand or cfg.brand
        effective_category = category or cfg.category
        competitors = competitor or [c.name for c in cfg.competitors]

        if not effective_brand:
            fail(console, InputError("A brand is required (--brand or config 'brand')"))
        if not effective_category:
            fail(console, InputError("A category is required (argument or config 'category')"))

        generated = generate_validation_probes(
            effective_brand, effective_category, competitors
        )
        output = resolve_format(format, json_output, cfg)

        if output == OutputFormat.json:
            console.print_json(json.dumps([p.model_dump(mode="json") for p in generated]))
            return
        if output == OutputFormat.csv:
            print(format_probes_csv(generated), end="")
            return

        table = Table(
            title=(
                f"Validation probes for {escape(effective_brand)} "
                f"({escape(effective_category)})"
            )
        )
        table.add_column("#", justify="right")
        table.add_column("Category", style="bold")
        table.add_column("Prompt")
        for i, probe in enumerate(generated, start=1):
            table.add_row(str(i), probe.category.value, escape(probe.prompt))
        console.print(table)
        console.print(f"\n[bold]{len(generated)}[/bold] probes generated")
