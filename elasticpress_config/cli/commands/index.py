"""Index naming commands."""

import sys
from typing import Optional, Tuple

import click
from rich.console import Console

from ...store import ConfigStore

console = Console()


@click.command("index-name")
@click.option("--site-id", type=int, default=None, help="Site identifier")
@click.pass_obj
def index_name(store: ConfigStore, site_id: Optional[int]) -> None:
    """Print the index name of a site."""
    name = store.get_index_name(site_id)
    if name is False:
        console.print("[red]Error:[/red] Site has no URL")
        sys.exit(1)
    click.echo(name)


@click.command("index-url")
@click.argument("indexes", nargs=-1)
@click.pass_obj
def index_url(store: ConfigStore, indexes: Tuple[str, ...]) -> None:
    """Print the URL of one or more indexes."""
    click.echo(store.get_index_url(list(indexes) if indexes else None))


@click.command()
@click.pass_obj
def alias(store: ConfigStore) -> None:
    """Print the network alias."""
    click.echo(store.get_network_alias())


@click.command("post-types")
@click.pass_obj
def post_types(store: ConfigStore) -> None:
    """Print the indexable content types."""
    for name in store.get_indexable_post_types():
        click.echo(name)


@click.command("post-status")
@click.pass_obj
def post_status(store: ConfigStore) -> None:
    """Print the indexable post statuses."""
    for status in store.get_indexable_post_status():
        click.echo(status)
