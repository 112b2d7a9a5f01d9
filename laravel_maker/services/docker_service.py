"""Docker service for the container runtime CLI."""

import logging
import shlex
import sys
from typing import Optional, Sequence

from ..core.constants import DOCKER_EXECUTABLE
from .exceptions import DockerError, ProcessLaunchError
from .process_runner import ExitResult, ProcessRunner

logger = logging.getLogger(__name__)


class DockerService:
    """Service for Docker CLI operations with clean abstractions.

    Every call goes through a ``ProcessRunner`` and re-queries the runtime;
    nothing about container state is cached.
    """

    def __init__(self, runner: Optional[ProcessRunner] = None, tty: Optional[bool] = None):
        """Initialize Docker service.

        Args:
            runner: Process runner used for every docker invocation
            tty: Allocate a TTY for exec calls (defaults to whether stdin is a terminal)
        """
        self.runner = runner or ProcessRunner()
        self.tty = sys.stdin.isatty() if tty is None else tty

    def is_running(self, name: str) -> bool:
        """Check whether a container matching ``name`` is running.

        Args:
            name: Container name filter

        Returns:
            True if at least one running container matches

        Raises:
            DockerError: If the listing call cannot be made or fails
        """
        try:
            result, output = self.runner.run_capturing(
                DOCKER_EXECUTABLE, ["ps", "-q", "-f", f"name={name}"]
            )
        except ProcessLaunchError as e:
            raise DockerError(f"Failed to check container status: {e}") from e

        if not result.success:
            raise DockerError(
                f"Failed to check container status for '{name}' (exit {result.returncode})"
            )
        return bool(output.strip())

    def compose_up(self) -> None:
        """Start all services of the compose environment in the background.

        Raises:
            DockerError: If 'docker compose up -d' cannot run or fails
        """
        self._check(
            ["compose", "up", "-d"],
            "Failed to start the Docker Compose environment. Check your configuration.",
        )

    def compose_restart(self, service: str) -> None:
        """Restart a single compose service.

        Raises:
            DockerError: If the restart cannot run or fails
        """
        self._check(
            ["compose", "restart", service],
            f"Failed to restart the '{service}' service. "
            f"Check that it is defined in docker-compose.yml.",
        )

    def exec(self, container: str, args: Sequence[str]) -> ExitResult:
        """Execute a command inside a running container.

        Args:
            container: Container name
            args: Command and arguments to run in the container

        Returns:
            Exit result of the exec call

        Raises:
            DockerError: If docker itself cannot be launched
        """
        exec_args = ["exec"]
        if self.tty:
            exec_args.append("-it")
        exec_args.append(container)
        exec_args.extend(args)
        try:
            return self.runner.run(DOCKER_EXECUTABLE, exec_args)
        except ProcessLaunchError as e:
            raise DockerError(f"Failed to run command in container '{container}': {e}") from e

    def exec_shell(self, container: str, workdir: str, script: str) -> ExitResult:
        """Run a shell script inside ``workdir`` of a running container."""
        command = f"cd {shlex.quote(workdir)} && {script}"
        return self.exec(container, ["sh", "-c", command])

    def run_in(self, container: str, workdir: str, script: str) -> None:
        """Run a shell script in a container and require it to succeed.

        Raises:
            DockerError: If the command cannot run or exits non-zero
        """
        result = self.exec_shell(container, workdir, script)
        if not result.success:
            raise DockerError(
                f"Command failed inside container '{container}': {script} "
                f"(exit {result.returncode})"
            )

    def probe(self, container: str, args: Sequence[str]) -> bool:
        """Run a quiet check command in a container and report success.

        Raises:
            DockerError: If docker itself cannot be launched
        """
        try:
            result, _ = self.runner.run_capturing(DOCKER_EXECUTABLE, ["exec", container, *args])
        except ProcessLaunchError as e:
            raise DockerError(f"Failed to run command in container '{container}': {e}") from e
        return result.success

    def _check(self, args: list[str], failure_message: str) -> None:
        try:
            result = self.runner.run(DOCKER_EXECUTABLE, args)
        except ProcessLaunchError as e:
            raise DockerError(f"Failed to run 'docker {' '.join(args)}': {e}") from e
        if not result.success:
            raise DockerError(f"{failure_message} (exit {result.returncode})")
