"""Shared option parsing and config resolution for CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape

from citeprobe.core.config import CiteprobeConfig, load_config
from citeprobe.core.errors import CiteprobeError, InputError
from citeprobe.core.models import Competitor, OutputFormat, ProviderResponse
from citeprobe.logging_config import setup_logging

_responses_adapter = TypeAdapter(list[ProviderResponse])


def fail(console: Console, exc: Exception) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise SystemExit(1)


def load_cli_config(ctx: typer.Context, console: Console) -> CiteprobeConfig:
    """Load the config file selected by the global ``--config`` option."""
    path = (ctx.obj or {}).get("config_path")
    try:
        cfg = load_config(path)
    except CiteprobeError as exc:
        fail(console, exc)
    if cfg.verbose:
        setup_logging(verbose=True)
    return cfg


def parse_competitors(values: list[str] | None) -> list[Competitor]:
    """Parse ``NAME`` or ``NAME=DOMAIN`` competitor options."""
    competitors: list[Competitor] = []
    for raw in values or []:
        name, _, domain = raw.partition("=")
        name = name.strip()
        if not name:
            raise InputError(f"Invalid competitor {raw!r}: expected NAME or NAME=DOMAIN")
        competitors.append(Competitor(name=name, domain=domain.strip()))
    return competitors


def parse_variables(values: list[str] | None) -> dict[str, str] | None:
    """Parse ``key=value`` template variable options; None when none given."""
    if not values:
        return None
    variables: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise InputError(f"Invalid variable {raw!r}: expected key=value")
        variables[key.strip()] = value
    return variables


def read_text(source: str) -> str:
    """Read a response from a file path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Cannot read {source}: {exc.strerror or exc}") from exc


def parse_responses(text: str) -> list[ProviderResponse]:
    """Parse a JSON list of ``{provider, model, response}`` objects.

    A top-level object with a ``responses`` list is accepted too.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"Invalid responses document: {exc.msg}") from exc

    if isinstance(data, dict):
        data = data.get("responses")
    if not isinstance(data, list):
        raise InputError("Invalid responses document: expected a list of responses")

    try:
        return _responses_adapter.validate_python(data)
    except ValidationError as exc:
        raise InputError(
            f"Invalid responses document: {exc.error_count()} invalid field(s)"
        ) from exc


def resolve_format(
    format: OutputFormat | None, json_output: bool, cfg: CiteprobeConfig
) -> OutputFormat:
    """--json is a shortcut for --format json; config format applies when unset."""
    if json_output and format is None:
        return OutputFormat.json
    if format is None and cfg.format is not None:
        try:
            return OutputFormat(cfg.format)
        except ValueError:
            pass
    return format or OutputFormat.table
