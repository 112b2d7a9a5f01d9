"""End-to-end provisioning of a new Laravel project."""

import logging
import time
from typing import Callable, Optional

import click

from ..models.config import Settings
from ..models.project import ProjectRequest
from ..models.rules import SubstitutionRule
from ..models.state import ProvisioningState
from ..services.docker_service import DockerService
from ..services.exceptions import DockerError
from .config_patcher import ConfigPatcher
from .constants import (
    CONTAINER_WEB_ROOT,
    DB_CONNECTION,
    DB_SERVICE_HOST,
    DB_USERNAME,
    PROXY_SERVICE,
    PROXY_SETTLE_DELAY,
)
from .host_alias import HostAliasRegistrar
from .readiness import ContainerReadinessPoller
from .vhost_generator import VhostGenerator

logger = logging.getLogger(__name__)

VITE_CONFIG_FILE = "vite.config.js"
VITE_HOST_MARKER = "host: '0.0.0.0'"
VITE_RULE = SubstitutionRule(
    pattern="^});$",
    replacement="\\tserver: {\\n\\t\\thost: '0.0.0.0'\\n\\t}\\n});",
    description="bind the vite dev server to all interfaces",
)


def env_rules(request: ProjectRequest, settings: Settings) -> list[SubstitutionRule]:
    """Rules applied to the generated ``.env``, in order."""
    return [
        SubstitutionRule.env_key("APP_URL", f"http://{request.host}"),
        SubstitutionRule.env_key("DB_CONNECTION", DB_CONNECTION),
        SubstitutionRule.env_key("DB_PORT", str(settings.db_port)),
        SubstitutionRule.env_key("DB_DATABASE", request.name),
        SubstitutionRule.env_key("DB_HOST", DB_SERVICE_HOST),
        SubstitutionRule.env_key("DB_USERNAME", DB_USERNAME),
        SubstitutionRule.env_key("DB_PASSWORD", settings.db_root_password),
    ]


class ProvisioningPipeline:
    """Runs every provisioning stage in a fixed order.

    Any failure stops the run and propagates. Completed stages are not rolled
    back; ``completed`` tells the caller how far the run got.
    """

    def __init__(
        self,
        docker_service: Optional[DockerService] = None,
        poller: Optional[ContainerReadinessPoller] = None,
        patcher: Optional[ConfigPatcher] = None,
        vhost_generator: Optional[VhostGenerator] = None,
        registrar: Optional[HostAliasRegistrar] = None,
        web_root: str = CONTAINER_WEB_ROOT,
        proxy_service: str = PROXY_SERVICE,
        settle_delay: float = PROXY_SETTLE_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.docker_service = docker_service or DockerService()
        self.poller = poller or ContainerReadinessPoller(self.docker_service)
        self.patcher = patcher or ConfigPatcher(self.docker_service)
        self.vhost_generator = vhost_generator or VhostGenerator()
        self.registrar = registrar or HostAliasRegistrar(self.docker_service.runner)
        self.web_root = web_root
        self.proxy_service = proxy_service
        self.settle_delay = settle_delay
        self.sleep = sleep
        self.completed: list[ProvisioningState] = []

    @property
    def last_completed(self) -> Optional[ProvisioningState]:
        return self.completed[-1] if self.completed else None

    def run(self, request: ProjectRequest, settings: Settings, resume: bool = False) -> None:
        """Provision ``request`` using ``settings``.

        Args:
            request: Validated project request
            settings: Resolved run settings
            resume: Skip scaffolding when the project already exists in the container

        Raises:
            ProvisioningError: From the first stage that fails
        """
        self.completed = []
        self._reached(ProvisioningState.ENVIRONMENT_READY)

        self.poller.ensure_ready(settings.php_container_name)
        self._reached(ProvisioningState.CONTAINER_READY)

        self.scaffold(request, settings, resume=resume)
        self._reached(ProvisioningState.PROJECT_SCAFFOLDED)

        self.configure(request, settings)
        self._reached(ProvisioningState.CONFIG_PATCHED)

        self.install_dependencies(request, settings)
        self._reached(ProvisioningState.DEPENDENCIES_INSTALLED)

        self.vhost_generator.write(request)
        self._reached(ProvisioningState.VHOST_WRITTEN)

        self.registrar.ensure_alias(request.host)
        self._reached(ProvisioningState.HOST_ALIAS_REGISTERED)

        self.restart_proxy()
        self._reached(ProvisioningState.PROXY_RESTARTED)

    def project_dir(self, request: ProjectRequest) -> str:
        return f"{self.web_root}/{request.name}"

    def scaffold(self, request: ProjectRequest, settings: Settings, resume: bool = False) -> None:
        container = settings.php_container_name
        if resume and self.docker_service.probe(
            container, ["test", "-f", f"{self.project_dir(request)}/artisan"]
        ):
            click.echo(f">> Project '{request.name}' already exists in the container, skipping install")
            return

        click.echo(f">> Installing Laravel ({request.laravel_version})")
        result = self.docker_service.exec(
            container,
            [
                "composer",
                "create-project",
                "laravel/laravel",
                request.name,
                request.laravel_version,
            ],
        )
        if not result.success:
            raise DockerError(
                "Composer failed to create the project. Check the container logs. "
                f"Exit status: {result.returncode}"
            )
        click.echo(f"Laravel project '{request.name}' created in {request.path}")

    def configure(self, request: ProjectRequest, settings: Settings) -> None:
        container = settings.php_container_name
        workdir = self.project_dir(request)

        click.echo("---")
        click.echo(">> Configuring .env...")
        self.patcher.apply_rules(container, workdir, env_rules(request, settings))
        click.echo(".env configured.")

        click.echo(">> Running Artisan commands (config:clear, migrate)...")
        self.docker_service.run_in(container, workdir, "php artisan config:clear")
        self.docker_service.run_in(container, workdir, "php artisan migrate --force")

    def install_dependencies(self, request: ProjectRequest, settings: Settings) -> None:
        workdir = self.project_dir(request)

        click.echo(">> Running composer update...")
        self.docker_service.run_in(settings.php_container_name, workdir, "composer update")

        click.echo(">> Running npm install...")
        self.docker_service.run_in(settings.node_container_name, workdir, "npm install")

        click.echo(f">> Configuring {VITE_CONFIG_FILE}...")
        if self.docker_service.probe(
            settings.php_container_name,
            ["grep", "-qF", VITE_HOST_MARKER, f"{workdir}/{VITE_CONFIG_FILE}"],
        ):
            click.echo(f"{VITE_CONFIG_FILE} already binds to all interfaces.")
            return
        self.patcher.apply_rules(
            settings.php_container_name, workdir, [VITE_RULE], target=VITE_CONFIG_FILE
        )
        click.echo(f"{VITE_CONFIG_FILE} configured.")

    def restart_proxy(self) -> None:
        click.echo("---")
        click.echo(f"Restarting the '{self.proxy_service}' container to load the new virtual host...")
        self.docker_service.compose_restart(self.proxy_service)
        self.sleep(self.settle_delay)
        click.echo(f"Container '{self.proxy_service}' restarted.")

    def _reached(self, state: ProvisioningState) -> None:
        logger.info(f"Reached stage: {state.label}")
        self.completed.append(state)
