"""
Filter command: match a JSON array against a search query
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from primkit import FilterByQueryOptions, PrimkitError, filter_by_query, is_array_valid

from .._io import load_json

console = Console()
err_console = Console(stderr=True)


def _cell(value) -> str:
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    return escape(text)


def _columns(items: List) -> List[str]:
    cols: List[str] = []
    for item in items:
        if isinstance(item, dict):
            for key in item:
                if key not in cols:
                    cols.append(key)
    return cols


def filter_command(
    path: str = typer.Argument(..., help="JSON file holding an array ('-' reads stdin)"),
    query: str = typer.Argument(..., help="Search query; items matching any word are kept"),
    prop: Optional[str] = typer.Option(None, "--prop", "-p", help="Only match against this field"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Maximum number of results"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Filter the items of a JSON array by a search query.

    Examples:
        primkit filter users.json "ali bob"
        primkit filter users.json ali --prop name --limit 1
        primkit filter users.json ali --json
    """
    try:
        items = load_json(path)
    except FileNotFoundError:
        err_console.print(f"[red]Error: File not found:[/red] {path}")
        raise typer.Exit(2)
    except PrimkitError as e:
        err_console.print(f"[red]Error ({e.kind.value}):[/red] {e.message}")
        raise typer.Exit(2)

    if not is_array_valid(items, allow_empty=True):
        err_console.print("[red]Error:[/red] the JSON document must be an array")
        raise typer.Exit(2)

    matches = filter_by_query(items, query, FilterByQueryOptions(query_prop=prop, limit=limit))

    if json_output:
        print(json.dumps({"items": matches, "count": len(matches)}, indent=2, ensure_ascii=False))
        raise typer.Exit(0)

    if not matches:
        console.print("[yellow]No items match the query[/yellow]")
        raise typer.Exit(0)

    cols = _columns(matches)
    table = Table(title=f"Matches for: {escape(query)}")
    if cols:
        for col in cols:
            table.add_column(str(col))
        for item in matches:
            row = item if isinstance(item, dict) else {}
            table.add_row(*(_cell(row[col]) if col in row else "" for col in cols))
    else:
        table.add_column("Value")
        for item in matches:
            table.add_row(_cell(item))

    console.print(table)
    console.print(f"\n[bold]Total matches:[/bold] {len(matches)}")
