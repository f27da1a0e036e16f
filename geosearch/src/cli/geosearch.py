"""
CLI for geosearch - Hebrew location-aware search over JSON datasets.
"""
from __future__ import annotations
import json
import logging
from typing import List, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..common.config import CONFIG
from ..common.schemas import as_item
from ..pipeline.he_norm import normalize_hebrew
from ..pipeline.loaders import load_items, load_regions
from ..pipeline.region_expand import should_expand_region
from ..pipeline.search_engine import SearchEngine

app = typer.Typer(help="Hebrew free-text search with region-aware ranking")
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, CONFIG.LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(kind: str, path: Optional[str]) -> List[dict]:
    if not path:
        return []
    loader = load_items if kind == "items" else load_regions
    try:
        return loader(path)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Error loading {kind}: {exc}[/red]")
        raise typer.Exit(1)


@app.command("search")
def cmd_search(
    query: str = typer.Argument("", help="Free-text query"),
    items_file: str = typer.Option(..., "--items", help="Items file (.json / .jsonl)"),
    regions_file: Optional[str] = typer.Option(None, "--regions", help="Regions file (.json / .jsonl)"),
    filter_type: str = typer.Option(CONFIG.FILTER_ALL, "--type", "-t", help="Only items with this type/tag"),
    limit: int = typer.Option(0, "--limit", "-n", help="Show at most N results (0 = all)"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON lines"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Rank items against QUERY."""
    _setup_logging(verbose)
    engine = SearchEngine(_load("items", items_file), _load("regions", regions_file))
    results = engine.search(query, filter_type)
    if limit > 0:
        results = results[:limit]

    if as_json:
        for rec in results:
            typer.echo(json.dumps(rec, ensure_ascii=False))
        return

    if not results:
        console.print("[yellow]No results[/yellow]")
        return
    table = Table(title=f"{len(results)} results")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Location")
    table.add_column("Types")
    for i, rec in enumerate(results, 1):
        it = as_item(rec)
        table.add_row(str(i), it.name, it.location, ", ".join([*it.type, *it.tags]))
    console.print(table)


@app.command("normalize")
def cmd_normalize(text: str):
    """Print the normalized form of TEXT."""
    typer.echo(normalize_hebrew(text))


@app.command("expand")
def cmd_expand(
    query: str,
    regions_file: str = typer.Option(..., "--regions", help="Regions file (.json / .jsonl)"),
):
    """Tell whether QUERY triggers region expansion."""
    engine = SearchEngine(regions=_load("regions", regions_file))
    norm = normalize_hebrew(query)
    expand = should_expand_region(norm, engine.regions)
    color = "green" if expand else "yellow"
    console.print(f"[blue]Normalized:[/blue] {norm}")
    console.print(f"[{color}]Region expansion: {'yes' if expand else 'no'}[/{color}]")


@app.command("types")
def cmd_types(
    items_file: str = typer.Option(..., "--items", help="Items file (.json / .jsonl)"),
):
    """List every type/tag label in the dataset, first seen first."""
    engine = SearchEngine(_load("items", items_file))
    for label in engine.available_types():
        typer.echo(label)


def main():
    app()

if __name__ == "__main__":
    main()
