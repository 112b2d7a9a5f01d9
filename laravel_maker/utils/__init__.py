"""Utilities for Laravel Maker."""

from .naming import normalize_project_name
from .path_finder import PathFinder

__all__ = [
    'normalize_project_name',
    'PathFinder',
]
