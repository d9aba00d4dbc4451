"""Show command."""

import click
from rich.console import Console
from rich.table import Table

from ...store import ConfigStore

console = Console()


def _format(value) -> str:
    if value is None:
        return "[dim]unset[/dim]"
    if isinstance(value, list):
        return ", ".join(value)
    return str(value)


@click.command()
@click.pass_obj
def show(store: ConfigStore) -> None:
    """Show stored and derived settings."""
    table = Table(title="Search Backend Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in store.to_dict().items():
        table.add_row(key, _format(value))

    console.print(table)
