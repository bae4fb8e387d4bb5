"""
Shared console output helpers for CLI commands.
"""

from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table


def fail(message: str, plain: bool = False, hint: str | None = None) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    if plain:
        click.echo(message, err=True)
    else:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {escape(message)}")
        if hint:
            console.print(f"[dim]{escape(hint)}[/dim]")
    raise SystemExit(1)


def property_table(title: str, rows: list[tuple[str, str]]) -> Table:
    """Two-column property/value table."""
    table = Table(title=title, show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")
    for name, value in rows:
        table.add_row(name, escape(value))
    return table


def print_table(title: str, rows: list[tuple[str, str]]) -> None:
    Console().print(property_table(title, rows))
