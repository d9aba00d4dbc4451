"""CLI commands package."""

import sys
from typing import Optional

import click
from rich.console import Console

from ...config import ConfigurationError, load_settings
from ...logging import init_logging
from ...store import ConfigStore
from .index import alias, index_name, index_url, post_status, post_types
from .related import related_posts
from .server import set_host, set_port
from .show import show

console = Console()


@click.group()
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML or JSON settings file",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], verbose: int) -> None:
    """Search backend configuration CLI."""
    try:
        settings = load_settings(config_file)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    # -v flags take precedence over LOG_LEVEL
    init_logging(level=settings.log_level, verbosity=verbose or None)

    store = ConfigStore.configure(ConfigStore.from_settings(settings))
    ctx.obj = store
    ctx.call_on_close(ConfigStore.reset)


cli.add_command(show)
cli.add_command(set_host)
cli.add_command(set_port)
cli.add_command(related_posts)
cli.add_command(index_name)
cli.add_command(index_url)
cli.add_command(alias)
cli.add_command(post_types)
cli.add_command(post_status)
