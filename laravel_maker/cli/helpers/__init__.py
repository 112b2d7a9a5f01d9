"""CLI helper functions shared by Laravel Maker commands.

The helpers provide:
- Logging setup for the ``--verbose`` flag
- Consistent error reporting and exit codes
- Table formatting for resolved settings
"""

import logging
import sys
from typing import NoReturn, Optional

import click
from tabulate import tabulate

from laravel_maker.models.config import Settings
from laravel_maker.models.state import ProvisioningState
from laravel_maker.services.exceptions import ProvisioningError


def configure_logging(verbose: bool) -> None:
    """Configure root logging; fallbacks logged at WARNING always show."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def exit_with_error(error: ProvisioningError, last_stage: Optional[ProvisioningState] = None) -> NoReturn:
    """Report a provisioning failure and exit with status 1."""
    click.echo(f"\nError: {error}", err=True)
    if last_stage is not None:
        click.echo(f"Last completed stage: {last_stage.label}", err=True)
    sys.exit(1)


def format_settings_table(settings: Settings) -> str:
    """Format resolved settings as a table, masking the password."""
    rows = [
        ["Container name", settings.container_name],
        ["PHP container", settings.php_container_name],
        ["Node container", settings.node_container_name],
        ["Server port", settings.server_port],
        ["Database port", settings.db_port],
        ["Database root password", "*" * len(settings.db_root_password)],
    ]
    return tabulate(rows, headers=["Setting", "Value"], tablefmt="simple")
