"""Utilities for locating files relative to the working directory."""

from pathlib import Path
from typing import Optional

from ..core.constants import PROVISIONING_MARKER_DIR


class PathFinder:
    """Looks up files in the current directory, then its parent."""

    def __init__(self, base: Optional[Path] = None):
        self.base = base or Path('.')

    def candidates(self) -> list[Path]:
        return [self.base, self.base / '..']

    def find_file(self, filename: str) -> Optional[Path]:
        """Find ``filename`` in the base directory or its parent."""
        for directory in self.candidates():
            path = directory / filename
            if path.exists():
                return path
        return None

    def find_provisioning_root(self, marker: str = PROVISIONING_MARKER_DIR) -> Optional[Path]:
        """Find the directory containing the ``marker`` subdirectory."""
        for directory in self.candidates():
            if (directory / marker).is_dir():
                return directory
        return None
