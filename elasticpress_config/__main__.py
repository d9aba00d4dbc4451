"""
Main Entry Point for the ElasticPress Configuration Accessor

Example Usage:
    $ python -m elasticpress_config show
    $ python -m elasticpress_config set-host search.example.com
    $ python -m elasticpress_config set-port 9201
    $ python -m elasticpress_config index-url posts pages
"""

import sys
from typing import Optional, Sequence

import click

from .cli import cli


def main(args: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments.
            Defaults to sys.argv[1:].

    Returns:
        Exit code.
    """
    try:
        cli(args=args, prog_name="ep-config")
        return 0

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
