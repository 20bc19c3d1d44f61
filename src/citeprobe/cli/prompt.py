"""Prompt and categories commands — expand probe templates."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from citeprobe.cli._helpers import fail, load_cli_config, parse_variables
from citeprobe.core.errors import InputError
from citeprobe.core.prompts import build_prompt, list_probe_categories

console = Console()


def register(app: typer.Typer) -> None:
    """Register the prompt and categories commands onto the Typer app."""

    @app.command()
    def prompt(
        ctx: typer.Context,
        query: str = typer.Argument(help="Topic or query to probe, e.g. 'CRM tools'"),
        category: str = typer.Option(
            None, "--category", "-k", help="Probe category (see 'citeprobe categories')"
        ),
        var: list[str] = typer.Option(
            None, "--var", help="Template variable as key=value (repeatable)"
        ),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """Build the prompt a probe would send to an AI provider."""
        cfg = load_cli_config(ctx, console)
        effective_category = category or cfg.category or "best-of"

        try:
            variables = parse_variables(var)
        except InputError as exc:
            fail(console, exc)

        text = build_prompt(query, effective_category, variables)

        if json_output:
            console.print_json(json.dumps({
                "query": query,
                "category": effective_category,
                "variables": variables or {},
                "prompt": text,
            }))
            return

        console.print(text, markup=False, highlight=False, soft_wrap=True)

    @app.command()
    def categories(
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """List the available probe categories."""
        infos = list_probe_categories()

        if json_output:
            console.print_json(json.dumps([i.model_dump(mode="json") for i in infos]))
            return

        table = Table(title="Probe Categories")
        table.add_column("Category", style="bold", no_wrap=True)
        table.add_column("Type")
        table.add_column("Label")
        table.add_column("Description")
        for info in infos:
            table.add_row(
                info.category.value, info.type.value, info.label, info.description
            )
        console.print(table)
