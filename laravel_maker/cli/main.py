"""Main CLI entry point for Laravel Maker."""

import click

from laravel_maker.cli.helpers import configure_logging
from .commands.new import new
from .commands.config import config


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def cli(verbose):
    """Laravel Maker - Provision Laravel projects in a Docker dev environment"""
    configure_logging(verbose)


# Register commands
cli.add_command(new)
cli.add_command(config)


if __name__ == '__main__':
    cli()
