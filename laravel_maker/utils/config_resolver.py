"""Resolution of run settings from the environment files."""

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Mapping, Optional

import click
import questionary
from dotenv import dotenv_values

from ..core.constants import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_DB_PORT,
    DEFAULT_DB_ROOT_PASSWORD,
    DEFAULT_SERVER_PORT,
    ENV_FILE,
    EXAMPLE_ENV_FILE,
)
from ..models.config import Settings
from ..services.exceptions import ProvisioningIOError, UserAbortedError, ValidationError
from .path_finder import PathFinder

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], Optional[bool]]


def _ask_confirm(message: str) -> Optional[bool]:
    return questionary.confirm(message, default=True).ask()


class ConfigResolver:
    """Builds ``Settings`` from the process environment, a dotenv file and defaults.

    Precedence is process environment, then the dotenv file, then the compiled
    defaults. Missing, empty or unparsable values fall back to the default and
    the fallback is logged.
    """

    def __init__(
        self,
        finder: Optional[PathFinder] = None,
        environ: Optional[Mapping[str, str]] = None,
        confirm: Optional[ConfirmFn] = None,
        assume_yes: bool = False,
    ):
        self.finder = finder or PathFinder()
        self.environ = os.environ if environ is None else environ
        self.confirm = confirm or _ask_confirm
        self.assume_yes = assume_yes

    def resolve(self) -> Settings:
        """Locate the env file and resolve all settings.

        Raises:
            ValidationError: If neither the env file nor its template exists
            UserAbortedError: If the user declines the template defaults
            ProvisioningIOError: If the template cannot be copied
        """
        env_path = self.ensure_env_file()
        click.echo("Loading settings from .env...")
        values = self.load_values(env_path)
        return self.settings_from(values)

    def ensure_env_file(self) -> Path:
        """Return the env file path, creating it from the template when needed."""
        env_path = self.finder.find_file(ENV_FILE)
        if env_path is not None:
            logger.info(f"Found env file at {env_path}")
            return env_path

        click.echo(f"{ENV_FILE} not found. Trying to create it from {EXAMPLE_ENV_FILE}...")
        example_path = self.finder.find_file(EXAMPLE_ENV_FILE)
        if example_path is None:
            raise ValidationError(
                f"Neither {ENV_FILE} nor {EXAMPLE_ENV_FILE} was found. "
                f"Check the project structure."
            )

        env_path = example_path.with_name(ENV_FILE)
        try:
            shutil.copyfile(example_path, env_path)
        except OSError as e:
            raise ProvisioningIOError(f"Failed to copy {example_path} to {env_path}: {e}") from e
        click.echo(f"Copied {example_path} to {env_path}")

        if self.assume_yes:
            return env_path

        click.echo(f"The {ENV_FILE} file was created with the default values.")
        accepted = self.confirm(f"Continue with the default {ENV_FILE} settings?")
        if not accepted:
            raise UserAbortedError(
                f"Edit {env_path} and run the command again."
            )
        click.echo(f"Continuing with the default {ENV_FILE} settings.")
        return env_path

    def load_values(self, env_path: Path) -> dict[str, str]:
        """Merge dotenv values with the process environment."""
        values = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
        for key in ("CONTAINER_NAME", "SERVER_PORT", "DB_PORT", "DB_ROOT_PASSWORD"):
            if key in self.environ:
                values[key] = self.environ[key]
        return values

    def settings_from(self, values: Mapping[str, str]) -> Settings:
        """Build settings from raw key/value pairs, applying defaults."""
        settings = Settings(
            container_name=_text(values, "CONTAINER_NAME", DEFAULT_CONTAINER_NAME),
            server_port=_port(values, "SERVER_PORT", DEFAULT_SERVER_PORT),
            db_port=_port(values, "DB_PORT", DEFAULT_DB_PORT),
            db_root_password=_text(
                values, "DB_ROOT_PASSWORD", DEFAULT_DB_ROOT_PASSWORD, secret=True
            ),
        )
        logger.info(
            f"Settings resolved (PHP container: {settings.php_container_name}, "
            f"server port: {settings.server_port})"
        )
        return settings


def _text(values: Mapping[str, str], key: str, default: str, secret: bool = False) -> str:
    value = (values.get(key) or "").strip()
    if value:
        logger.info(f"{key} taken from environment")
        return value
    shown = "****" if secret else default
    logger.warning(f"{key} not found or empty. Using default: '{shown}'")
    return default


def _port(values: Mapping[str, str], key: str, default: int) -> int:
    raw = values.get(key)
    if raw is None or not raw.strip():
        logger.warning(f"{key} not found. Using default: {default}")
        return default
    value = raw.strip()
    port = int(value) if value.isascii() and value.isdigit() else 0
    if not 1 <= port <= 65535:
        logger.warning(f"{key} ('{value}') is invalid. Using default: {default}")
        return default
    logger.info(f"{key} taken from environment")
    return port
