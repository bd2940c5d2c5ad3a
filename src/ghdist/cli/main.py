#!/usr/bin/env python3
"""
ghdist CLI - language and activity distributions for GitHub users.

Commands:
    ghdist report FILE...            Fetch users listed in FILE(s), print a table, write JSON
    ghdist distribution COUNTS.json  Rank and bucket a local {key: count} map
    ghdist version                   Show version information
"""

import json
import logging
import math
from pathlib import Path

import typer
from rich import print as rprint

from ghdist import __version__

app = typer.Typer(
    name="ghdist",
    help="GitHub language and activity distribution reports",
    add_completion=True,
    no_args_is_help=True,
)


@app.command()
def report(
    files: list[Path] = typer.Argument(..., help="Text files with one GitHub username per line"),
    output: Path = typer.Option(None, "--output", "-o", help="JSON output path"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to conf.yml"),
    no_table: bool = typer.Option(False, "--no-table", help="Skip the console table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress logs on stderr"),
) -> None:
    """
    Build the distribution report for a list of GitHub users.

    Fetches every user's repositories, computes the language and activity
    distributions, renders them as a table and writes them to a JSON file.
    """
    # Imports here to speed up CLI startup
    import yaml
    from dotenv import load_dotenv

    from ghdist.cli.report import cmd_report
    from ghdist.core.config import get_config
    from ghdist.core.logging_config import setup_logging

    load_dotenv()
    try:
        config = get_config(config_path)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        rprint(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1)

    setup_logging(config.paths.log_dir, verbose=verbose)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting report for {len(files)} file(s)")

    cmd_report(files, config, output=output, show_table=not no_table)


def _is_count(value: object) -> bool:
    # bool is an int subclass; JSON true/false are not counts
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


@app.command()
def distribution(
    counts_file: Path = typer.Argument(..., help="JSON object mapping keys to counts"),
    top: int = typer.Option(5, "--top", "-n", min=0, help="Entries kept before Others"),
    digits: int = typer.Option(2, "--digits", "-d", min=0, help="Floor-rounding digits"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Rank and bucket a local count map.

    Examples:
        ghdist distribution languages.json
        ghdist distribution languages.json --top 3 --json
    """
    from ghdist.processing.distribution import bucket_top, rank, to_percentages
    from ghdist.processing.formatting import format_distribution

    try:
        with open(counts_file) as f:
            counts = json.load(f)
    except FileNotFoundError:
        rprint(f"[red]File not found: {counts_file}[/red]")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        rprint(f"[red]Invalid JSON in {counts_file}: {e}[/red]")
        raise typer.Exit(code=1)

    if not isinstance(counts, dict) or not all(_is_count(v) for v in counts.values()):
        rprint("[red]Expected a JSON object mapping keys to finite numbers[/red]")
        raise typer.Exit(code=1)

    bucketed = bucket_top(rank(to_percentages(counts, digits)), top)

    if json_output:
        typer.echo(json.dumps([entry.model_dump() for entry in bucketed], indent=2))
    else:
        typer.echo(format_distribution(bucketed))


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"ghdist version {__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
