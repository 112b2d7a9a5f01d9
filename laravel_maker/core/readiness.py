"""Container readiness polling."""

import logging
import time
from typing import Callable

import click

from ..services.docker_service import DockerService
from ..services.exceptions import DockerError
from .constants import READINESS_INTERVAL, READINESS_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class ContainerReadinessPoller:
    """Makes sure a service container is running before work starts in it."""

    def __init__(
        self,
        docker_service: DockerService,
        max_attempts: int = READINESS_MAX_ATTEMPTS,
        interval: float = READINESS_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.docker_service = docker_service
        self.max_attempts = max_attempts
        self.interval = interval
        self.sleep = sleep

    def ensure_ready(self, service_name: str) -> None:
        """Return once ``service_name`` is running, starting the environment if needed.

        A failed initial status query counts as "not running". During polling a
        failed query aborts immediately.

        Raises:
            DockerError: If the environment cannot be started, a status query
                fails while polling, or the attempt budget is exhausted
        """
        if self._initially_running(service_name):
            click.echo(f"Container '{service_name}' is running.")
            return

        click.echo(
            f"Container '{service_name}' is not running. "
            f"Starting the Docker Compose environment..."
        )
        self.docker_service.compose_up()

        for attempt in range(1, self.max_attempts + 1):
            click.echo(
                f"Waiting for container '{service_name}' "
                f"(attempt {attempt} of {self.max_attempts})..."
            )
            self.sleep(self.interval)
            if self.docker_service.is_running(service_name):
                click.echo(f"Container '{service_name}' is running and ready.")
                return
            logger.debug(f"{service_name} not running after attempt {attempt}")

        raise DockerError(
            f"Container '{service_name}' failed to start after {self.max_attempts} attempts"
        )

    def _initially_running(self, service_name: str) -> bool:
        try:
            return self.docker_service.is_running(service_name)
        except DockerError as e:
            logger.warning(f"Status check for '{service_name}' failed: {e}")
            return False
