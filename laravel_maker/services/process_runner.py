"""Thin wrapper around subprocess for external commands."""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from .exceptions import ProcessLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExitResult:
    """Outcome of a finished external process."""

    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


class ProcessRunner:
    """Runs external programs synchronously.

    Interactive commands inherit the caller's standard streams. Output is only
    captured when explicitly requested. A non-zero exit status is never raised;
    callers inspect the returned ``ExitResult``.
    """

    def run(self, command: str, args: Optional[Sequence[str]] = None) -> ExitResult:
        """Run a command and wait for it to finish.

        Args:
            command: Executable name or path
            args: Arguments passed to the executable

        Returns:
            Exit result of the process

        Raises:
            ProcessLaunchError: If the executable cannot be spawned
        """
        cmd = self._build(command, args)
        logger.debug(f"Running: {shlex.join(cmd)}")
        try:
            completed = subprocess.run(cmd, check=False)
        except OSError as e:
            raise ProcessLaunchError(f"Failed to launch '{command}': {e}") from e
        return ExitResult(completed.returncode)

    def run_capturing(
        self, command: str, args: Optional[Sequence[str]] = None
    ) -> tuple[ExitResult, str]:
        """Run a command and capture its standard output.

        Returns:
            Tuple of (exit result, decoded stdout)

        Raises:
            ProcessLaunchError: If the executable cannot be spawned
        """
        cmd = self._build(command, args)
        logger.debug(f"Running (captured): {shlex.join(cmd)}")
        try:
            completed = subprocess.run(
                cmd,
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise ProcessLaunchError(f"Failed to launch '{command}': {e}") from e
        return ExitResult(completed.returncode), completed.stdout or ""

    @staticmethod
    def _build(command: str, args: Optional[Sequence[str]]) -> list[str]:
        return [command, *(args or [])]
