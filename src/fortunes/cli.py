"""Command line interface for fortunes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fortunes.config import AppConfig, parse_duration
from fortunes.display import display_fortune
from fortunes.errors import ConfigurationError, FortuneError
from fortunes.index.indexer import Indexer, list_fortune_files
from fortunes.index.selector import Selector
from fortunes.models import resolve_mode


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="fortunes - print a random fortune from a folder of fortune files")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_files(folder: Path, counts: bool) -> None:
    if not counts:
        for path in list_fortune_files(folder):
            console.print(str(path), markup=False, highlight=False, soft_wrap=True)
        return

    corpus = Indexer().index(folder)
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Total", justify="right")
    table.add_column("Short", justify="right")
    table.add_column("Long", justify="right")
    for item in corpus:
        table.add_row(
            str(item.path), str(item.total_count), str(item.short_count), str(item.long_count)
        )
    console.print(table)


@app.command()
def main(
    folder: Optional[Path] = typer.Option(
        None, "--folder", "-f", help="Fortunes folder (defaults to $FORTUNES_FOLDER)"
    ),
    short: bool = typer.Option(False, "--short", "-s", help="Short fortunes only"),
    long: bool = typer.Option(False, "--long", "-l", help="Long fortunes only"),
    wait: str = typer.Option("0s", "--wait", "-w", help="Delay before displaying the fortune"),
    list_files: bool = typer.Option(
        False, "--list", "-t", help="Print out the fortune files in the folder"
    ),
    counts: bool = typer.Option(
        False, "--counts", help="Show fortune counts per file (requires --list)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random generator"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print a random fortune."""
    _setup_logging(verbose)
    try:
        mode = resolve_mode(short, long)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    try:
        delay = parse_duration(wait)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--wait'") from exc
    if counts and not list_files:
        raise typer.BadParameter("--counts requires --list", param_hint="'--counts'")

    config = AppConfig(folder=folder, mode=mode, wait=delay, seed=seed)
    try:
        resolved_folder = config.resolve_folder(Path.cwd())
        if list_files:
            _print_files(resolved_folder, counts)
            return
        corpus = Indexer().index(resolved_folder)
        fortune = Selector(seed=config.seed).select(corpus, config.mode)
    except FortuneError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    display_fortune(fortune, config.wait)
