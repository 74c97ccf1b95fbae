"""
UUID command: generate identifiers
"""

import typer
from rich.console import Console

from primkit import generate_uuid

console = Console()


def uuid_command(
    version: int = typer.Option(4, "--version", "-v", help="UUID version (4 or 7)"),
    count: int = typer.Option(1, "--count", "-c", min=1, help="How many ids to generate"),
):
    """
    Generate random (v4) or time-ordered (v7) UUIDs, one per line.

    Examples:
        primkit uuid
        primkit uuid --version 7 --count 5
    """
    if version not in (4, 7):
        console.print(f"[red]Error:[/red] unsupported UUID version: {version}")
        raise typer.Exit(2)
    for _ in range(count):
        print(generate_uuid(version))
