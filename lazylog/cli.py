"""
Command-line interface for the lazylog analyzer.

This module provides the main CLI entry point. Analyzed lines are written
to stdout; errors, warnings and statistics go to stderr.
"""

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lazylog.config import get_settings
from lazylog.log_processor.pipeline import LineFilterPipeline, build_filter_spec
from lazylog.models import RunStats
from lazylog.utils.errors import ConfigurationError, LogFileError
from lazylog.utils.logging import setup_logging

# Initialize Typer app and Rich console
app = typer.Typer(
    name="lazylog",
    help="Scan log files and pretty print the JSON embedded in their lines",
    add_completion=False,
)
console = Console(stderr=True)


def _print_stats(stats: RunStats) -> None:
    table = Table(title="Analysis summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Lines read", str(stats.lines_read))
    table.add_row("Lines matched", str(stats.lines_matched))
    table.add_row("Lines written", str(stats.lines_emitted))
    table.add_row("JSON objects extracted", str(stats.json_extracted))
    table.add_row("Extraction failures", str(stats.extraction_failures))

    console.print(table)


@app.command()
def analyze(
    filepath: Path = typer.Argument(..., help="Log file to analyze"),
    search: Optional[str] = typer.Option(
        None,
        "--search",
        "-s",
        help="Search pattern to track in the logs",
    ),
    pattern: Optional[List[str]] = typer.Option(
        None,
        "--pattern",
        "-p",
        help="Search patterns to track in the logs (repeatable)",
    ),
    json_mode: bool = typer.Option(
        False,
        "--json",
        help="Parse json objects on each log line and pretty print them",
    ),
    echo_matches: bool = typer.Option(
        False,
        "--echo-matches",
        help="Print lines matched by --pattern even without --json",
    ),
    show_stats: bool = typer.Option(False, "--stats", help="Show a summary when done"),
):
    """Begin analyzing a log file."""
    try:
        spec = build_filter_spec(
            search=search,
            patterns=pattern,
            json_mode=json_mode,
            echo_pattern_matches=echo_matches,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    pipeline = LineFilterPipeline(spec)

    try:
        stats = pipeline.run(filepath, emit=typer.echo)
    except LogFileError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if show_stats:
        _print_stats(stats)

    if stats.extraction_failures:
        console.print(
            f"[red]Error:[/red] JSON could not be extracted from {stats.extraction_failures} line(s)"
        )
        raise typer.Exit(1)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write diagnostics to this file",
    ),
):
    """lazylog - find and pretty print JSON in log files."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(1)

    log_level = "DEBUG" if debug else settings.log_level
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    setup_logging(log_level=log_level, log_file_path=log_file)


if __name__ == "__main__":
    app()
