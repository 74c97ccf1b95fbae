"""
JSON commands: canon, equal
"""

import typer
from rich.console import Console

from primkit import PrimkitError, canonical_hash, is_equal, stringify_deterministic
from primkit.logging_config import get_logger

from .._io import load_json

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)


@app.command()
def canon(
    path: str = typer.Argument("-", help="JSON file to canonicalize ('-' reads stdin)"),
    show_hash: bool = typer.Option(False, "--hash", help="Print the SHA-256 of the canonical form instead"),
):
    """
    Print the canonical (key-sorted, compact) form of a JSON document.

    Examples:
        primkit json canon data.json
        cat data.json | primkit json canon
        primkit json canon data.json --hash
    """
    logger = get_logger(__name__, operation="canon")
    try:
        value = load_json(path)
        out = canonical_hash(value) if show_hash else stringify_deterministic(value)
        # plain print: rich markup would mangle JSON brackets
        print(out)
    except FileNotFoundError:
        err_console.print(f"[red]Error: File not found:[/red] {path}")
        raise typer.Exit(2)
    except PrimkitError as e:
        logger.debug("canon failed", exc_info=True)
        err_console.print(f"[red]Error ({e.kind.value}):[/red] {e.message}")
        raise typer.Exit(2)


@app.command()
def equal(
    path_a: str = typer.Argument(..., help="First JSON file"),
    path_b: str = typer.Argument(..., help="Second JSON file"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only set the exit code"),
):
    """
    Compare two JSON documents ignoring key order.

    Exit code 0 when equal, 1 when different, 2 on error.

    Examples:
        primkit json equal before.json after.json
    """
    try:
        same = is_equal(load_json(path_a), load_json(path_b))
    except FileNotFoundError as e:
        err_console.print(f"[red]Error: File not found:[/red] {e.filename}")
        raise typer.Exit(2)
    except PrimkitError as e:
        err_console.print(f"[red]Error ({e.kind.value}):[/red] {e.message}")
        raise typer.Exit(2)

    if not quiet:
        if same:
            console.print("[green]equal[/green]")
        else:
            console.print("[yellow]different[/yellow]")
    raise typer.Exit(0 if same else 1)
