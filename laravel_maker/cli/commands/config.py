"""Configuration commands for Laravel Maker."""

import click

from laravel_maker.cli.helpers import exit_with_error, format_settings_table
from ...services.exceptions import ProvisioningError
from ...utils.config_resolver import ConfigResolver


@click.group()
def config():
    """Inspect the development environment configuration"""
    pass


@config.command()
@click.option('--yes', '-y', 'assume_yes', is_flag=True,
              help='Accept the default .env created from env.example')
def show(assume_yes):
    """Display the resolved settings"""
    try:
        settings = ConfigResolver(assume_yes=assume_yes).resolve()
    except ProvisioningError as e:
        exit_with_error(e)

    click.echo("Resolved settings:")
    click.echo(format_settings_table(settings))
