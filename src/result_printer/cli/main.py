"""CLI for result-printer: print a saved results file as JSON or HTML."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from result_printer.core.config import AppSettings, ObservabilityConfig
from result_printer.logging_config import setup_logging
from result_printer.modes import get_valid_output_options
from result_printer.printer import write

app = typer.Typer(name="result-printer", help="Render analysis results as JSON or HTML")
err_console = Console(stderr=True)


@app.callback()
def main() -> None:
    """Render analysis results as JSON or HTML."""


def _validate_mode(value: str) -> str:
    valid = get_valid_output_options()
    if value not in valid:
        raise typer.BadParameter(f"{value!r} is not one of {', '.join(valid)}")
    return value


def _load_results(results_path: Path) -> object:
    try:
        return json.loads(results_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"{results_path} is not valid JSON: {e}") from e


@app.command("print")
def print_results(
    results_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON results file"),
    output: str = typer.Option(
        "json",
        "--output",
        "-o",
        callback=_validate_mode,
        help=f"Output mode: {', '.join(get_valid_output_options())}",
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output-path", help="Destination file (stdout when omitted)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a results file and write it to stdout or --output-path."""
    settings = AppSettings()
    if verbose:
        settings = AppSettings(observability=ObservabilityConfig(log_level="DEBUG"))
    setup_logging(settings.observability)

    results = _load_results(results_file)

    try:
        asyncio.run(write(results, output, output_path, settings=settings))
    except OSError as e:
        err_console.print(f"[red]Could not write output: {e}[/red]")
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
