"""Interactive collection of the project request."""

from pathlib import Path
from typing import Callable, Optional

import click
import questionary

from ..models.project import ProjectRequest
from ..services.exceptions import UserAbortedError, ValidationError
from ..utils.naming import normalize_project_name
from .constants import (
    DEFAULT_LARAVEL_VERSION,
    MAXIMAL_LARAVEL_VERSION,
    MINIMAL_LARAVEL_VERSION,
    PROJECTS_DIR,
    TLD_SUFFIX,
)


def _ask_text(message: str) -> Optional[str]:
    return questionary.text(message).ask()


def _ask_confirm(message: str) -> Optional[bool]:
    return questionary.confirm(message, default=True).ask()


def validate_version(raw: str) -> str:
    """Validate a Laravel major version; blank means the default."""
    value = raw.strip()
    if not value:
        return str(DEFAULT_LARAVEL_VERSION)
    if not (value.isascii() and value.isdigit()):
        raise ValidationError(
            f"'{value}' is not a valid version. Enter only the major version number "
            f"(e.g. {DEFAULT_LARAVEL_VERSION})."
        )
    version = int(value)
    if version > MAXIMAL_LARAVEL_VERSION:
        raise ValidationError(f"Version {version} is out of range.")
    if version < MINIMAL_LARAVEL_VERSION:
        raise ValidationError(
            f"Version {version} is not supported. "
            f"The minimum accepted version is {MINIMAL_LARAVEL_VERSION}."
        )
    return str(version)


class InputCollector:
    """Gathers project name and Laravel version, prompting when not given."""

    def __init__(
        self,
        projects_dir: str = PROJECTS_DIR,
        tld: str = TLD_SUFFIX,
        ask_text: Callable[[str], Optional[str]] = _ask_text,
        ask_confirm: Callable[[str], Optional[bool]] = _ask_confirm,
    ):
        self.projects_dir = projects_dir
        self.tld = tld
        self.ask_text = ask_text
        self.ask_confirm = ask_confirm

    def collect(
        self,
        name: Optional[str] = None,
        version: Optional[str] = None,
        allow_existing: bool = False,
    ) -> ProjectRequest:
        """Build a ``ProjectRequest`` from options or prompts.

        Values passed in are validated once and raise on failure; prompted
        values are asked again until valid.

        Raises:
            ValidationError: If a passed-in value is invalid
            UserAbortedError: If the user cancels a prompt
        """
        if name is None:
            project_name = self.prompt_name(allow_existing)
        else:
            project_name = self.validate_name(name, allow_existing)

        if version is None:
            laravel_version = self.prompt_version()
        else:
            laravel_version = validate_version(version)

        request = ProjectRequest.for_name(
            project_name, laravel_version, tld=self.tld, projects_dir=self.projects_dir
        )
        click.echo("---")
        click.echo(
            f"Valid input: project='{request.name}', host='{request.host}', "
            f"version='{request.laravel_version}'"
        )
        click.echo("---")
        return request

    def validate_name(self, raw: str, allow_existing: bool = False) -> str:
        """Normalize a project name and check that its directory is free."""
        raw_name = raw.strip().lower()
        if not raw_name:
            raise ValidationError("The project name cannot be empty.")

        name = normalize_project_name(raw_name)
        if not name:
            raise ValidationError("The name is empty after formatting.")
        if name != raw_name:
            click.echo(f"Formatted: '{raw_name}' changed to '{name}' (kebab-case).")

        if not allow_existing and self.project_path(name).exists():
            raise ValidationError(f"The directory {self.projects_dir}/{name} already exists.")
        return name

    def project_path(self, name: str) -> Path:
        return Path(self.projects_dir) / name

    def prompt_name(self, allow_existing: bool = False) -> str:
        while True:
            answer = self.ask_text("Project NAME (e.g. example-app):")
            if answer is None:
                raise UserAbortedError("Project name prompt cancelled.")
            try:
                return self.validate_name(answer, allow_existing)
            except ValidationError as e:
                click.echo(f"Error: {e}", err=True)
                name = normalize_project_name(answer)
                if not name or not self.project_path(name).exists():
                    continue
                if not self.ask_confirm("Try another project name?"):
                    raise UserAbortedError("The user chose to exit.") from e

    def prompt_version(self) -> str:
        click.echo("---")
        click.echo(
            f"Common Laravel versions: {DEFAULT_LARAVEL_VERSION} (LTS), 11 "
            f"(minimum accepted: {MINIMAL_LARAVEL_VERSION})"
        )
        while True:
            answer = self.ask_text(
                f"Laravel version (ENTER={DEFAULT_LARAVEL_VERSION}, "
                f"min={MINIMAL_LARAVEL_VERSION}):"
            )
            if answer is None:
                raise UserAbortedError("Laravel version prompt cancelled.")
            try:
                version = validate_version(answer)
            except ValidationError as e:
                click.echo(f"Error: {e}", err=True)
                continue
            if not answer.strip():
                click.echo(f"Using default: {version}.")
            return version
