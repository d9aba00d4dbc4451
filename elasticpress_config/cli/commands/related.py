"""Related posts command."""

import sys
from typing import Optional

import click
from rich.console import Console

from ...constants import MAX_RELATED_POSTS
from ...store import ConfigStore

console = Console()


@click.command("related-posts")
@click.option(
    "--enable/--disable",
    default=None,
    help="Show or hide related posts below single posts",
)
@click.option(
    "--count",
    type=int,
    default=None,
    help=f"Number of related posts to show (1-{MAX_RELATED_POSTS})",
)
@click.pass_obj
def related_posts(
    store: ConfigStore, enable: Optional[bool], count: Optional[int]
) -> None:
    """Show or change related posts settings."""
    if enable is not None:
        store.set_show_related_posts(enable)

    if count is not None and not store.set_related_posts_count(count):
        console.print(
            f"[red]Error:[/red] Count must be between 1 and {MAX_RELATED_POSTS}"
        )
        sys.exit(1)

    state = "enabled" if store.get_show_related_posts() else "disabled"
    console.print(f"Related posts {state} (count: {store.get_related_posts_count()})")
