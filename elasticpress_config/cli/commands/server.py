"""Server connection commands."""

import logging
import sys

import click
from rich.console import Console

from ...store import ConfigStore

logger = logging.getLogger(__name__)
console = Console()


@click.command("set-host")
@click.argument("host")
@click.pass_obj
def set_host(store: ConfigStore, host: str) -> None:
    """Set the search server host."""
    store.set_server_host(host)
    console.print(f"Server URL: {store.get_server_url()}")


@click.command("set-port")
@click.argument("port")
@click.pass_obj
def set_port(store: ConfigStore, port: str) -> None:
    """Set the search server port."""
    if not store.set_server_port(port):
        console.print(f"[red]Error:[/red] Invalid port: {port}")
        sys.exit(1)
    console.print(f"Server port: {store.get_server_port()}")
