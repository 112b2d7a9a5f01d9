"""Apache virtual host generation."""

import logging
from pathlib import Path
from typing import Optional

import click

from ..models.project import ProjectRequest
from ..services.exceptions import NotFoundError, ProvisioningIOError
from ..utils.path_finder import PathFinder
from .constants import CONTAINER_WEB_ROOT, VHOSTS_DIR

logger = logging.getLogger(__name__)

VHOST_TEMPLATE = """<VirtualHost *:80>
    # Host name used to reach the project (e.g. my-app.test)
    ServerName {host}

    # Laravel public directory (mounted under {web_root}/)
    DocumentRoot {web_root}/{name}/public

    <Directory {web_root}/{name}/public>
        AllowOverride All
        Require all granted
        DirectoryIndex index.php index.html
    </Directory>

    <FilesMatch \\.php$>
        SetHandler "proxy:fcgi://php:9000"
    </FilesMatch>
</VirtualHost>
"""


class VhostGenerator:
    """Writes ``<host>.conf`` into the vhosts directory of the provisioning root."""

    def __init__(
        self,
        finder: Optional[PathFinder] = None,
        vhosts_dir: str = VHOSTS_DIR,
        web_root: str = CONTAINER_WEB_ROOT,
    ):
        self.finder = finder or PathFinder()
        self.vhosts_dir = vhosts_dir
        self.web_root = web_root

    def render(self, request: ProjectRequest) -> str:
        return VHOST_TEMPLATE.format(
            host=request.host, name=request.name, web_root=self.web_root
        )

    def write(self, request: ProjectRequest) -> Path:
        """Render and write the vhost file, overwriting any existing one.

        Returns:
            Path of the written file

        Raises:
            NotFoundError: If no provisioning root can be found
            ProvisioningIOError: If the file cannot be written
        """
        click.echo("Creating virtual host configuration...")
        root = self.finder.find_provisioning_root()
        if root is None:
            raise NotFoundError(
                f"Could not determine the provisioning root for project '{request.name}'."
            )

        vhost_path = root / self.vhosts_dir / f"{request.host}.conf"
        try:
            vhost_path.parent.mkdir(parents=True, exist_ok=True)
            vhost_path.write_text(self.render(request))
        except OSError as e:
            raise ProvisioningIOError(f"Failed to write {vhost_path}: {e}") from e

        click.echo(f"Virtual host created: {vhost_path}")
        return vhost_path
