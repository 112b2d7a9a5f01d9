"""New project command for Laravel Maker."""

import click
from rich.console import Console

from laravel_maker.cli.helpers import exit_with_error
from ...core.input_collector import InputCollector
from ...core.pipeline import ProvisioningPipeline
from ...services.exceptions import ProvisioningError
from ...utils.config_resolver import ConfigResolver


@click.command()
@click.option('--name', envvar='LARAVEL_MAKER_NAME', help='Project name (prompted when omitted)')
@click.option('--framework-version', 'framework_version', envvar='LARAVEL_MAKER_VERSION',
              help='Laravel major version (prompted when omitted)')
@click.option('--yes', '-y', 'assume_yes', is_flag=True,
              help='Accept the default .env created from env.example')
@click.option('--resume', is_flag=True,
              help='Continue a partially provisioned project instead of requiring a new one')
def new(name, framework_version, assume_yes, resume):
    """Create and configure a new Laravel project"""
    console = Console()
    console.print("[bold]--- Dev Container Laravel Maker ---[/bold]")

    pipeline = None
    try:
        settings = ConfigResolver(assume_yes=assume_yes).resolve()
        request = InputCollector().collect(
            name=name, version=framework_version, allow_existing=resume
        )
        pipeline = ProvisioningPipeline()
        pipeline.run(request, settings, resume=resume)
    except ProvisioningError as e:
        exit_with_error(e, pipeline.last_completed if pipeline else None)

    console.print("\n---")
    console.print(f"[green]New Laravel project '{request.name}' created successfully![/green]")
    console.print(f"URL: http://{request.host}:{settings.server_port}")
    console.print("---")
    console.print("The project is ready. You can open it in your browser.")
