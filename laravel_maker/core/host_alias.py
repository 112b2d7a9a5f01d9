"""Registration of local host aliases in the system hosts file."""

import logging
import shlex
from pathlib import Path
from typing import Optional

import click

from ..services.exceptions import ProcessLaunchError, ProvisioningIOError, ValidationError
from ..services.process_runner import ProcessRunner
from .constants import HOSTS_FILE, LOOPBACK_ADDRESS

logger = logging.getLogger(__name__)


def has_alias(content: str, host: str) -> bool:
    """Check whether ``host`` is listed as a hostname field in hosts file content.

    Comments are ignored and the match is on whole fields, so ``oo.test`` does
    not match a line listing ``foo.test``.
    """
    for line in content.splitlines():
        fields = line.split('#', 1)[0].split()
        if len(fields) >= 2 and host in fields[1:]:
            return True
    return False


class HostAliasRegistrar:
    """Adds ``127.0.0.1 <host>`` to the hosts file through sudo when missing."""

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        hosts_file: str = HOSTS_FILE,
        address: str = LOOPBACK_ADDRESS,
    ):
        self.runner = runner or ProcessRunner()
        self.hosts_file = hosts_file
        self.address = address

    def ensure_alias(self, host: str) -> bool:
        """Make sure ``host`` resolves locally.

        An unreadable hosts file does not abort; the write is attempted anyway.

        Returns:
            True if an entry was appended, False if it already existed

        Raises:
            ProvisioningIOError: If sudo cannot be launched
            ValidationError: If the privileged write fails or is cancelled
        """
        try:
            content = Path(self.hosts_file).read_text()
        except OSError as e:
            click.echo(
                f"Could not read {self.hosts_file} to check for the entry: {e}. "
                f"Trying to write it with sudo."
            )
        else:
            if has_alias(content, host):
                click.echo(f"Host entry '{host}' already exists in {self.hosts_file}.")
                return False

        click.echo(f"Updating {self.hosts_file} requires administrator permission (sudo).")
        entry = f"{self.address} {host}"
        command = f"echo {shlex.quote(entry)} >> {shlex.quote(self.hosts_file)}"
        try:
            result = self.runner.run("sudo", ["sh", "-c", command])
        except ProcessLaunchError as e:
            raise ProvisioningIOError(str(e)) from e

        if not result.success:
            raise ValidationError(
                f"sudo failed while updating {self.hosts_file}. "
                f"Check that the password was typed correctly. Exit status: {result.returncode}"
            )
        logger.info(f"Appended '{entry}' to {self.hosts_file}")
        click.echo(f"Host '{host}' added to {self.hosts_file}.")
        return True
