"""citeprobe CLI entry point."""

from __future__ import annotations

import typer

from citeprobe import __version__
from citeprobe.cli import detect as _detect_cmd
from citeprobe.cli import probes as _probes_cmd
from citeprobe.cli import prompt as _prompt_cmd
from citeprobe.logging_config import setup_logging

app = typer.Typer(
    name="citeprobe",
    help="Build AI answer-engine probes and detect brand citations in their responses.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"citeprobe {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: str = typer.Option(
        None, "--config", help="Path to a .citeprobe.yml config file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging from the detector"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Build AI answer-engine probes and detect brand citations in their responses."""
    setup_logging(verbose)
    ctx.obj = {"config_path": config}


_prompt_cmd.register(app)
_probes_cmd.register(app)
_detect_cmd.register(app)


if __name__ == "__main__":
    app()
