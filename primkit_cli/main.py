#!/usr/bin/env python3
"""
primkit CLI

Main entrypoint for the primkit command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from primkit.logging_config import setup_logging
from primkit_cli.commands import filter as filter_cmd
from primkit_cli.commands import ids, json_ops

app = typer.Typer(
    name="primkit",
    help="Canonical JSON, deep equality and query filtering",
    add_completion=False,
)

console = Console()

# Add command groups
app.add_typer(json_ops.app, name="json", help="Deterministic JSON operations")

# Add standalone commands
app.command("filter")(filter_cmd.filter_command)
app.command("uuid")(ids.uuid_command)


@app.callback()
def _configure():
    """Configure logging from PRIMKIT_LOG_LEVEL / PRIMKIT_LOG_FORMAT."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from primkit import __version__ as lib_version
    from primkit_cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]primkit CLI[/bold]", f"v{__version__}")
    table.add_row("Library", f"v{lib_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
