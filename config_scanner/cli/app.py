"""
CLI entry point - Typer command-line interface

Scan flow:
1. Load and parse the source tree
2. Scan in-scope files for configuration usage
3. Print the report
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from config_scanner.core import (
    ProjectLoadError,
    ServiceUsageScanner,
    load_project,
)
from config_scanner.reporters import Reporter, RichReporter

app = typer.Typer(
    name="config-scanner",
    help="Config-Scanner: find the configuration keys a TypeScript codebase reads. 🔎",
    add_completion=False,
)

console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def scan(
    root: Optional[str] = typer.Argument(
        None,
        help="Root directory to scan (defaults to the current directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every file and key as it is found",
    ),
) -> None:
    """
    Scan a project for configuration keys and environment variables.

    Examples:
        config-scanner
        config-scanner ./my-service
    """
    configure_logging(verbose)

    target = root if root else str(Path.cwd())

    try:
        files = load_project(Path(target))
    except ProjectLoadError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    usage = ServiceUsageScanner(files).scan_project()

    reporter: Reporter = RichReporter(console)
    reporter.report(usage, target)


if __name__ == "__main__":
    app()
